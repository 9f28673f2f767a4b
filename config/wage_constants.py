"""Selection lists and the static lookup tables behind the estimator page.

Every table is keyed by one of the selection enumerations below.  Tables
keyed by wage type feed the legal-factor list and the categories table;
tables keyed by the elapsed-time bucket feed the status summary.
"""

STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL",
    "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT",
    "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI",
    "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY", "DC",
]

# value -> label, in display order
WAGE_TYPES = {
    "overtime": "Overtime",
    "minimum-wage": "Minimum Wage",
    "commissions": "Commissions",
    "final-pay": "Final Pay",
}

PAY_FREQUENCIES = {
    "weekly": "Weekly",
    "bi-weekly": "Bi-Weekly",
    "semi-monthly": "Semi-Monthly",
    "monthly": "Monthly",
}

TIME_BUCKETS = {
    "less-30": "Less than 30 days",
    "30-90": "30–90 days",
    "90-180": "90–180 days",
    "180-365": "180 days–1 year",
    "over-365": "Over 1 year",
}

WAGE_CATEGORIES = {
    "overtime": ["Hours over 40/week", "OT rate calculations", "Exempt classification", "Comp time policies"],
    "minimum-wage": ["Federal minimum compliance", "State wage requirements", "Tip credit provisions", "Youth wage rules"],
    "commissions": ["Agreement terms", "Earned vs paid timing", "Chargebacks", "Termination policies"],
    "final-pay": ["Timing requirements", "PTO payout", "Expense reimbursement", "Severance terms"],
}

LEGAL_FACTORS = {
    "overtime": ["FLSA provisions", "State OT laws", "Classification status", "Workweek definitions", "Regular rate calc"],
    "minimum-wage": ["Federal vs state floor", "Industry exemptions", "Piece rate rules", "Training wages", "COLA adjustments"],
    "commissions": ["Written agreements", "Calculation methods", "Payment timing", "Post-term commissions", "Clawbacks"],
    "final-pay": ["State timing laws", "Separation type", "PTO policies", "Deduction limits", "Filing deadlines"],
}

TIME_NOTES = {
    "less-30": "Recent issues may be within normal payroll correction windows.",
    "30-90": "Claims often fall within standard dispute resolution periods.",
    "90-180": "May warrant formal documentation; administrative filing windows apply.",
    "180-365": "Extended disputes may involve statute of limitations considerations.",
    "over-365": "FLSA has 2-year statute (3 for willful); state laws vary significantly.",
}

URGENCY = {
    "less-30": {"label": "Recent Issue", "color": "#166534", "bg": "#F0FDF4"},
    "30-90": {"label": "Active Concern", "color": "#0369A1", "bg": "#F0F9FF"},
    "90-180": {"label": "Extended Duration", "color": "#92400E", "bg": "#FFFBEB"},
    "180-365": {"label": "Review Needed", "color": "#991B1B", "bg": "#FEF2F2"},
    "over-365": {"label": "Time-Sensitive", "color": "#991B1B", "bg": "#FEF2F2"},
}

DEFAULT_SELECTION = {
    "state": "CA",
    "wage_type": "overtime",
    "pay_frequency": "bi-weekly",
    "time_since_owed": "30-90",
}

DISCLAIMER = (
    "This tool provides an informational estimate of unpaid wage situations based on "
    "common labor-law factors including overtime rules, minimum wage, commissions, and "
    "final pay. Results are estimates only and not legal advice. Laws vary by state. "
    "Consult a qualified employment attorney for guidance specific to your situation."
)

FOOTER_NOTES = ["Estimates only", "Not legal advice", "Laws vary by state"]
