"""
repositories/ - Data Access Layer
==================================
Builds the SQL for each catalog access pattern, runs it on a caller-supplied
connection and maps the raw rows to Animal domain objects.
"""
