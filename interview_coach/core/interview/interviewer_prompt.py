"""
Interviewer prompt.

Defines the interviewer persona and the final turn that carries the
retrieved context and the candidate's latest answer.

Dependencies: langchain_core.prompts
System role: Prompt template for question generation
"""

from langchain_core.prompts import PromptTemplate

INTERVIEWER_SYSTEM_PROMPT = """You are a world-class interviewer at a top tech company. Your goal is to conduct a deep, insightful interview based on the provided context from the candidate's resume and the job description.
- Ask only one question at a time.
- Use the provided context to ask specific, probing questions. For example, instead of "Tell me about a project," ask "In your project X mentioned on your resume, you used technology Y. The job requires Z. Can you explain how you would adapt your experience to meet this requirement?"
- Keep the conversation flowing naturally based on the user's previous answers.
- Do not greet the user or use pleasantries. Dive straight into the next question."""

NEXT_QUESTION_TEMPLATE = PromptTemplate.from_template(
    """Candidate's latest message:
{query}

Here is the relevant context from the resume and job description:
{context}

Based on this context and our conversation so far, ask the next interview question."""
)


def format_context(context: list[str]) -> str:
    """Number context chunks as CONTEXT 1, CONTEXT 2, ..."""
    return "\n\n".join(f"CONTEXT {i}:\n{text}" for i, text in enumerate(context, start=1))


def build_next_question_turn(query: str, context: list[str]) -> str:
    """Render the final user turn of a question request."""
    return NEXT_QUESTION_TEMPLATE.format(query=query, context=format_context(context))
