"""
Interview coach analysis prompt.

Dependencies: langchain_core.prompts
System role: Prompt template for transcript feedback
"""

import json

from langchain_core.prompts import PromptTemplate

from interview_coach.core.analysis.analysis_schemas import TranscriptMessage

ANALYSIS_TEMPLATE = PromptTemplate.from_template(
    """As an expert interview coach, analyze the following interview transcript. Provide a summary of the candidate's performance, focusing on their strengths and areas for improvement. Also, infer the candidate's primary tone (e.g., Confident, Hesitant, Professional, Casual, Nervous). Format the response as: [TONE]###[FEEDBACK]. For example: "Confident###The candidate demonstrated strong technical knowledge...".

TRANSCRIPT:
{transcript}"""
)


def serialize_transcript(messages: list[TranscriptMessage]) -> str:
    """JSON transcript with candidate/interviewer roles, in order."""
    return json.dumps(
        [
            {"role": "candidate" if m.is_user else "interviewer", "text": m.text}
            for m in messages
        ],
        ensure_ascii=False,
    )


def build_analysis_prompt(messages: list[TranscriptMessage]) -> str:
    return ANALYSIS_TEMPLATE.format(transcript=serialize_transcript(messages))
