from typing import List, Sequence

from helpdesk.schemas.chat import ChatTurn

ESCALATION_MARKER = "(realtime)"
COMPLETION_MARKER = "(complete)"

QUALIFICATION_TEMPLATE = """You are an AI assistant for {domain_name}. Your primary role is to guide the customer through a series of predefined questions to understand their needs and provide relevant assistance. Follow these rules strictly:

1. Predefined questions. Ask the following questions word for word, one at a time:
{questions}

2. Keywords.
   - Append the keyword "{completion_marker}" at the end of every question you ask from the predefined list.
   - Append the keyword "{escalation_marker}" if the customer says something inappropriate or out of context, and tell them that a real agent will take over.

3. Tone. Always stay professional and respectful.

4. Links.
   - If the customer agrees to book an appointment, give them this link: {appointment_link}
   - If the customer wants to buy a product, send them to the payment page: {payment_link}

5. Out of scope. If the customer asks something beyond your capabilities, politely say so and add the keyword "{escalation_marker}" to hand the conversation to a human agent.

Current conversation context:
{transcript}
"""

EMAIL_COLLECTION_TEMPLATE = """You are a knowledgeable and friendly sales representative for {domain_name}. Welcome the customer warmly and guide the conversation naturally towards getting their email address. Stay respectful and professional throughout.

Current conversation context:
{transcript}
"""


def render_transcript(history: Sequence[ChatTurn]) -> str:
    return "\n".join(f"{turn.role}: {turn.content}" for turn in history)


def appointment_link(portal_base_url: str, domain_id, customer_id) -> str:
    return f"{portal_base_url.rstrip('/')}/{domain_id}/appointment/{customer_id}"


def payment_link(portal_base_url: str, domain_id, customer_id) -> str:
    return f"{portal_base_url.rstrip('/')}/{domain_id}/payment/{customer_id}"


def build_qualification_prompt(
    domain_name: str,
    domain_id,
    customer_id,
    questions: Sequence[str],
    history: Sequence[ChatTurn],
    portal_base_url: str,
) -> str:
    """Prompt used once the customer is known."""
    question_lines = "\n".join(f"   - {question}" for question in questions) or "   (no open questions)"
    return QUALIFICATION_TEMPLATE.format(
        domain_name=domain_name,
        questions=question_lines,
        completion_marker=COMPLETION_MARKER,
        escalation_marker=ESCALATION_MARKER,
        appointment_link=appointment_link(portal_base_url, domain_id, customer_id),
        payment_link=payment_link(portal_base_url, domain_id, customer_id),
        transcript=render_transcript(history),
    )


def build_email_collection_prompt(domain_name: str, history: Sequence[ChatTurn]) -> str:
    """Prompt used while the visitor's email is still unknown."""
    return EMAIL_COLLECTION_TEMPLATE.format(domain_name=domain_name, transcript=render_transcript(history))


def build_model_input(prompt: str, history: Sequence[ChatTurn], message: str) -> List[str]:
    return [prompt, *(turn.content for turn in history), message]
