"""
Prompt templates for quiz and bucket name generation.

Dependencies: langchain_core.prompts
System role: Prompt templates for the generation client
"""

from langchain_core.prompts import ChatPromptTemplate

QUIZ_SYSTEM_PROMPT = """You are an experienced teacher writing multiple-choice quizzes from study material.

## Instructions
1. Base every question ONLY on the provided material
2. Write exactly {question_count} questions at {difficulty} difficulty
3. Give every question exactly {choice_count} answer choices
4. Mark exactly one choice per question as correct
5. Explain briefly why the correct choice is right and why each other choice is wrong

If the material is empty, write general-knowledge questions instead."""

QUIZ_PROMPT = ChatPromptTemplate.from_messages([
    ("system", QUIZ_SYSTEM_PROMPT),
    ("human", """Material:
{context}

Write the quiz."""),
])

NAME_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "You name study collections. Reply with a short title of at most six words and nothing else."),
    ("human", """Excerpt:
{sample_text}

Title:"""),
])
