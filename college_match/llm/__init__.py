"""
Generative-AI integration layer.

Responsibilities:
- Manage Gemini API configuration and credentials.
- Forward a single prompt to Gemini and return the generated text.
- Map safety blocks and API failures to service errors.
"""
