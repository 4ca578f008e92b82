"""Prompt template for the Gemini resume analysis call."""


def build_analysis_prompt(resume_text: str) -> str:
    """Embed the resume text and the expected JSON schema in one instruction.

    The schema mirrors models.analysis.AnalysisResult. The model is not bound
    by it; result_validator repairs whatever comes back.
    """
    return f"""You are a professional resume analyst. Analyze this resume content and provide detailed feedback:
"{resume_text}"

Return your analysis as a JSON object with this structure:
{{
  "overallScore": <integer 0-100>,
  "sections": {{
    "content": {{ "score": <integer 0-100> }},
    "formatting": {{ "score": <integer 0-100> }},
    "keywords": {{ "score": <integer 0-100> }},
    "relevance": {{ "score": <integer 0-100> }}
  }},
  "keyInsights": [
    {{ "type": "positive", "text": "<specific strength>" }},
    {{ "type": "warning", "text": "<specific area of improvement>" }},
    {{ "type": "negative", "text": "<specific issue that needs addressing>" }}
  ],
  "recommendations": [
    {{
      "category": "<one of: content, keywords, formatting, other>",
      "title": "<short descriptive title>",
      "description": "<detailed explanation>",
      "examples": "<specific example of improvement>"
    }}
  ],
  "atsScores": {{
    "readability": <integer 0-100>,
    "keywords": <integer 0-100>,
    "formatting": <integer 0-100>
  }},
  "detectedKeywords": [<5-10 keywords or phrases found in the resume>]
}}

RULES:
- "keyInsights" must contain 3-5 entries; "type" is one of: positive, warning, negative.
- "recommendations" must contain 3-5 entries covering different categories (content, keywords, formatting).
- "examples" is optional.
- All scores are integers between 0 and 100.

Make the analysis detailed, constructive, and helpful for job seekers."""
