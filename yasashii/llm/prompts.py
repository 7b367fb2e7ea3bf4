from __future__ import annotations

from typing import Any, Dict, List

from ..enums import Role
from ..schemas.dictionary import ConversationTurn
from .client import GatewayMessage, GatewayRequest

PROMPTS = {
    "lookup_system": """あなたは、日本語を学ぶ人のためのシンプルな辞書AIです。あなたの仕事は、与えられた単語の意味を説明することです。複数の意味がある場合は、それぞれを個別の項目として提供してください。説明は、N5レベルの非常に簡単な日本語のみを使用し、小学生でも理解できるようにしてください。挨拶や追加のコメントは一切含めず、要求されたJSON形式でのみ回答してください。読み方や説明文など、すべてのテキストにおいて括弧（）やその他の記号は絶対に使用しないでください。

You are a simple dictionary AI for Japanese language learners. Your task is to explain the meaning of a given word. If there are multiple meanings, provide each as a separate entry. Use only very simple, N5-level Japanese that an elementary school student can understand. Do not include any greetings or extra comments; respond only in the requested JSON format. The reading for the word must be in hiragana only. For all text output, including readings and explanations, absolutely do not use parentheses () or any other symbols.""",
    "lookup_user": "「{word}」という言葉の意味を教えてください。 (Please tell me the meaning of the word \"{word}\".)",
    "tutor_system": """あなたは、親切で忍耐強い日本語の家庭教師です。ユーザーは先ほど「{word}」という単語を調べました。今から、その単語に関するユーザーの追加の質問に答えてください。説明は、引き続きN5レベルの非常に簡単な日本語のみを使用してください。フレンドリーな口調で、ユーザーの学習を助けてあげてください。挨拶や追加のコメントは不要です。括弧（）やその他の記号は絶対に使用せず、ユーザーの質問に直接答えてください。

You are a kind and patient Japanese language tutor. The user has just looked up the word "{word}". Your task is now to answer the user's follow-up questions about this word. Continue to use only very simple, N5-level Japanese in your explanations. Be friendly and help the user learn. Do not include greetings or extra comments. Absolutely do not use parentheses () or other symbols; answer the user's question directly.""",
}

# Gemini responseSchema (OpenAPI subset). Property names match WordExplanation aliases.
WORD_EXPLANATION_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "word": {
                "type": "STRING",
                "description": "The Japanese word being explained.",
            },
            "reading": {
                "type": "STRING",
                "description": "The hiragana reading of the word, without any parentheses or symbols.",
            },
            "briefMeaning": {
                "type": "STRING",
                "description": "A very short, one-sentence meaning in simple Japanese.",
            },
            "detailedExplanation": {
                "type": "STRING",
                "description": "A detailed 3-4 sentence explanation using extremely simple, N5-level Japanese.",
            },
        },
        "required": ["word", "reading", "briefMeaning", "detailedExplanation"],
    },
}


def build_lookup_request(word: str) -> GatewayRequest:
    return GatewayRequest(
        system_instruction=PROMPTS["lookup_system"],
        contents=[GatewayMessage(role=Role.USER, text=PROMPTS["lookup_user"].format(word=word))],
        response_schema=WORD_EXPLANATION_SCHEMA,
    )


def build_follow_up_request(word: str, history: List[ConversationTurn]) -> GatewayRequest:
    """Tutor request for ``word`` carrying the whole turn history, oldest first."""
    return GatewayRequest(
        system_instruction=PROMPTS["tutor_system"].format(word=word),
        contents=[GatewayMessage(role=turn.role, text=turn.content) for turn in history],
    )
