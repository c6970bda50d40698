# Pulse Prompts
# Prompt templates for review enrichment and the admin chat

LOW_RATING_THRESHOLD = 2

REPLY_PROMPT = """You are a customer service assistant responding to a customer's feedback.

Rating: {rating}/5 stars
Review: "{review}"

Write a friendly, professional and empathetic reply that:
1. Thanks the customer for their feedback
2. Acknowledges their {rating}-star rating and the specific points they raised
3. Shows that their feedback is valued{low_rating_line}
5. Is 2-3 sentences long

Return only the reply text.

Reply:"""

LOW_RATING_LINE = """
4. Expresses genuine concern about their experience and a commitment to improve"""

HIGH_RATING_LINE = """
4. Matches the tone of their experience"""

SUMMARY_PROMPT = """You are an analyst summarising customer feedback for internal administrators.

Rating: {rating}/5 stars
Review: "{review}"

Write a concise internal summary (1-2 sentences) that captures the overall sentiment and the key points raised.

Return only the summary text.

Summary:"""

ACTIONS_PROMPT = """You are a business consultant analysing customer feedback.

Rating: {rating}/5 stars
Review: "{review}"

Recommend 2-3 concrete, specific actions the business should take based on this feedback.
Each action should be a single short sentence.

Respond with ONLY a JSON array of strings. Do not wrap it in markdown code fences and do not add any other text.

Example: ["Retrain delivery staff on handling fragile items", "Add order tracking updates by SMS"]

Recommendations:"""

ADMIN_QUERY_PROMPT = """You are a customer insights analyst helping an administrator understand their customer feedback.

Answer the administrator's question using ONLY the feedback data below. If the data does not contain the answer, say so plainly.
Be concise and specific. Quote counts and ratings where they help. Use short paragraphs or bullet points.

FEEDBACK DATA
{context}

QUESTION
{question}

Answer:"""


def build_reply_prompt(rating, review):
    low_rating_line = LOW_RATING_LINE if rating <= LOW_RATING_THRESHOLD else HIGH_RATING_LINE
    return REPLY_PROMPT.format(rating=rating, review=review, low_rating_line=low_rating_line)


def build_summary_prompt(rating, review):
    return SUMMARY_PROMPT.format(rating=rating, review=review)


def build_actions_prompt(rating, review):
    return ACTIONS_PROMPT.format(rating=rating, review=review)


def build_admin_query_prompt(question, context):
    return ADMIN_QUERY_PROMPT.format(question=question.strip(), context=context)
