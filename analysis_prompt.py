"""
Webpage Audit Prompt

The field names requested here are the contract that
utils.parsing.json.parse_analysis_result depends on.
"""

ANALYSIS_FIELDS = ("whyThisProjectExists", "summary", "score", "accessibility", "suggestions")


PROMPT_TEMPLATE = """
You are Viewlytics, an AI webpage auditor designed to help users understand and improve any webpage.
Your job is to analyze the webpage content and return ONLY JSON, no extra text.

Explain WHY the page needs improvements and WHY this analysis is useful for the user.

Return JSON in this exact structure:

{{
  "whyThisProjectExists": string,
  "summary": string,
  "score": number,
  "accessibility": number,
  "suggestions": string[]
}}

Where:
- "whyThisProjectExists" = Explain why analyzing webpages matters, why optimization is important, and why tools like Viewlytics exist.
- "summary" = Clear, concise explanation of what the page contains.
- "score" = Overall performance score (0-100).
- "accessibility" = Accessibility score (0-100).
- "suggestions" = Practical, prioritized improvements.

CONTENT TO ANALYZE:
{url}
"""


def build_analysis_prompt(url: str) -> str:
    """
    Generate the webpage audit prompt for a normalized URL.

    Args:
        url: Normalized URL from utils.validation.url.normalize_url.
             Embedded as-is; the page itself is never fetched.

    Returns:
        Complete prompt string for the upstream model.
    """
    return PROMPT_TEMPLATE.format(url=url)
