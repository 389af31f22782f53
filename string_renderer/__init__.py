"""String Renderer - attribute rendering for template engines.

This package renders string attributes with named format options:
- Case conversion (upper, lower, cap) with locale tailoring
- Identifier shaping (Camel)
- Encoding (url-encode, xml-encode)
- printf-style format templates for everything else
"""

__version__ = "0.1.0"
