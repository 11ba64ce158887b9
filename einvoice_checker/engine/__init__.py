"""
Assessment engine: classifies a business and builds its e-invoice result.

Modules
-------
classifier : determine_category() — revenue/commencement rule table.
deadline   : calculate_implementation_details() + classify_urgency().
composer   : generate_results_content() + generate_action_items().
assessment : Assessment dataclass + run_assessment() — chains all three.

All functions are pure; no I/O beyond logging.
"""
