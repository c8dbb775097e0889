"""
handlers/ - Presentation Layer
================================
Console handlers. Each handler runs one demo step through the DemoService
and prints the report lines for it.
No SQL lives here.
"""
