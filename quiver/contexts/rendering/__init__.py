"""
Rendering Context

Responsibilities:
- Generates a resume PDF from a ResumeRecord
- Sets document metadata (Title, Author)
- Reports generator failures as GenerationError

Owns: PDF layout, fonts, document metadata
Never: Judges the generated output (see verification context)
"""
