"""
Verification Context

Responsibilities:
- Extracts page count, metadata and text from a PDF
- Runs the resume checklist against the source record
- Scopes generated artifacts so they are removed on every exit path
- Separates precondition failures (exceptions) from checklist failures (results)

Owns: ExtractedDocument, ChecklistResult, verification orchestration
Never: Modifies the PDF or the resume record
"""
