"""Request-independent logic.

Services are called by routes and accept their inputs explicitly:
- validation: required-field presence checks
- export: records -> .xlsx workbook
"""
