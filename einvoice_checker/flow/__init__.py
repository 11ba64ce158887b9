"""
Questionnaire flow: the multi-step form without any UI.

Modules
-------
questionnaire : QuestionStep + FormData + QuestionnaireState + StepOutcome,
                and the update_field() / advance() / go_back() /
                submit_newsletter() transitions.
"""
