"""UI styling constants for the Streamlit app."""

PRIMARY_COLOR = "#2563EB"
TEXT_SECONDARY = "#475569"
TEXT_MUTED = "#64748B"
BORDER_COLOR = "#E2E8F0"
STRIPE_COLOR = "#F8FAFC"
FONT_FAMILY = "Inter, sans-serif"

CUSTOM_CSS = f"""
<link rel="preconnect" href="https://fonts.googleapis.com">
<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700&display=swap" rel="stylesheet">
<style>
:root {{
    --color-primary: {PRIMARY_COLOR};
    --color-text-secondary: {TEXT_SECONDARY};
    --color-text-muted: {TEXT_MUTED};
    --color-border: {BORDER_COLOR};
    --radius-full: 9999px;
}}

body {{font-family: {FONT_FAMILY};}}

.card {{
    background: #FFFFFF;
    border: 1px solid var(--color-border);
    border-radius: 12px;
    padding: 1.5rem;
    margin-bottom: 1.5rem;
}}

.urgency-pill {{
    display: inline-block;
    padding: 0.5rem 1rem;
    border-radius: var(--radius-full);
    color: white;
    font-weight: 700;
    font-size: 0.875rem;
}}

.factor-dot {{
    width: 6px;
    height: 6px;
    border-radius: 50%;
    background-color: var(--color-primary);
    flex-shrink: 0;
}}

.ad-container {{
    border: 1px dashed var(--color-border);
    color: var(--color-text-muted);
    text-align: center;
    font-size: 0.75rem;
    padding: 1rem;
    margin-bottom: 1.5rem;
}}

.ad-sticky {{
    position: sticky;
    bottom: 0;
    background: #FFFFFF;
    margin-bottom: 0;
}}

/* Primary button */
.stButton > button {{
    background-color: var(--color-primary);
    color: white;
    border: none;
    width: 100%;
    font-weight: 600;
}}
</style>
"""
