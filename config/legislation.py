"""Quick links to the legislation behind the career (replace with official URLs)."""

LEGISLATION_LINKS = [
    {"title": "Law / Decree - Tax Auditor career (official link)", "url": "#"},
    {"title": "Pay scales and tables (official link)", "url": "#"},
    {"title": "GEPI - productivity bonus rules (official link)", "url": "#"},
    {"title": "VI - ajuda de custo rules (official link)", "url": "#"},
]
