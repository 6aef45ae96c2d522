"""Prompt templates for the language model.

The wording and the response format lines are a fixed contract with the
reply parsers in ``insight_service``.
"""

NONE_LISTED = "None listed"

SYNERGY_PROMPT = """You are analyzing two professionals for a networking CRM to find synergies between them.

ME (the user):
{my_profile}

My skills & interests:
{my_skills}

My work history:
{my_work}

My education:
{my_education}

THE CONNECTION (someone in my network):
{contact_info}

Their work history:
{contact_work}

Their education:
{contact_education}

Their projects/chronicle:
{contact_chronicle}

Write exactly three short paragraphs. Each should be 2-4 sentences, conversational but substantive. Be specific — reference actual details from both profiles. Don't be generic.

PARAGRAPH 1 - HOW I COULD HELP THEM:
Based on my skills, experience, and interests, identify concrete ways I might be useful to this connection. Think about introductions I could make, expertise I could share, projects where my background would complement theirs, or industries/domains where I have knowledge they might need. Be specific.

PARAGRAPH 2 - HOW THEY MIGHT HELP ME:
Based on their background, identify what they could offer me. Think about their industry knowledge, network access, skills I lack, mentorship potential, or career/project opportunities their position enables. Be specific.

PARAGRAPH 3 - COMMON GROUND FOR CONVERSATION:
Look for non-obvious shared experiences or interests — not just direct overlaps. Consider: geographic proximity (same city/region at overlapping times even if different schools/companies), generational similarities (similar age = similar cultural touchpoints), adjacent industries that share vocabulary, parallel career arcs, shared hobbies or interests that might not be immediately obvious. Be creative but grounded in the data. If there's very little overlap, say so honestly and suggest the one or two things they might bond over.

Respond in this exact format:
HELP_THEM: [paragraph]
HELP_ME: [paragraph]
COMMON_GROUND: [paragraph]"""

SUMMARY_PROMPT = """You are writing two things about a person for a networking CRM, based ONLY on the linked source material below.

TASK 1 - FULL SUMMARY:
Write 3-5 sentences in a measured, academic tone. Be factual and specific. Include age/DOB and location if found. State their current role, organization, industry, career highlights. No promotional language. No speculation.

TASK 2 - ONE-LINER:
Write a single short phrase (under 15 words) that captures what this person does in a descriptive, slightly expanded way. Not just their job title — explain what they actually do. Examples:
- "Veteran entertainment attorney specializing in talent deals"
- "Serial tech founder building AI tools for healthcare"
- "Award-winning documentary filmmaker and media executive"
- "Investment banker focused on mid-market M&A transactions"

Contact context:
{contact_info}
{source_section}

{no_sources_note}

Respond in this exact format:
SUMMARY: [your 3-5 sentence summary]
ONELINER: [your one-line description]"""

NO_SOURCES_NOTE = "No source URLs provided. Use only the contact fields above."


def or_none_listed(value: str | None) -> str:
    """Render an optional prompt section."""
    return value if value else NONE_LISTED
