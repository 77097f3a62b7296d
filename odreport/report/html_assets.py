# Styles injected into the standalone print view of a single table.
PRINT_CSS = """
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }
th { background-color: #f5f5f5; }
@media print {
  button { display: none; }
  table { page-break-inside: avoid; }
}
"""

# Print media rules the host page adds once for the whole report.
PAGE_PRINT_CSS = """
@media print {
  body { background: white; }
  .container { box-shadow: none; }
  .controls, .csv-download { display: none; }
  .section { break-inside: avoid; }
  table { page-break-inside: avoid; }
  @page { margin: 2cm; }
}
"""

PRINT_ON_LOAD_JS = "window.onload = () => window.print();"
