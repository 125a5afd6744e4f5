"""
QUIVER - QUality Inspection and Verification of Emitted Resumes

Generates a resume PDF from a structured record and verifies the result against
a fixed checklist of structural and content invariants.

Architecture:
- Intake Context: Resume record loading and validation
- Rendering Context: PDF generation from a resume record
- Verification Context: Text/metadata extraction, checklist evaluation, artifact lifecycle
"""

__version__ = "0.1.0"
