"""
Parsing Context

Responsibilities:
- Normalizes raw résumé text and guesses its language
- Splits the line stream into labeled section blocks
- Extracts structured records (experience, education, skills, ...) per block
- Assembles and sanitizes the canonical résumé document

Owns: Rule-based résumé parsing logic
Never: Performs network I/O, calls AI services, or renders templates
"""
