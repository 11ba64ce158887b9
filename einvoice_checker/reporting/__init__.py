"""
Reporting layer: terminal formatting and JSON export of assessment results.

Modules
-------
formatters : format_result_bundle() + format_field_errors() — ASCII output.
export     : export_to_json(), assessment_to_record(), save_assessment_record()
             — file output.
"""
