"""
Card schemas.
"""
from pydantic import BaseModel, Field
from typing import List


class KanjiWord(BaseModel):
    """Extra annotated sub-word shown on the back of a card."""
    kanji: str
    furigana: str
    en: str

    class Config:
        frozen = True


class Card(BaseModel):
    """A deck card. Loaded once from the deck asset and never mutated."""
    id: str = Field(..., min_length=1, description="Unique card identifier")
    sentence: str = Field(..., description="Example sentence in the target language")
    sentence_furigana: str = Field(..., description="Sentence with reading annotations (ruby markup)")
    sentence_en: str = Field(..., description="Sentence translation")
    word_kanji: str = Field(..., description="Target word, script form")
    word_furigana: str = Field(..., description="Target word, phonetic reading")
    word_en: str = Field(..., description="Target word translation")
    extra_kanji: List[KanjiWord] = Field(default_factory=list, description="Other annotated words in the sentence")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "card-001",
                "sentence": "猫が好きです。",
                "sentence_furigana": "<ruby>猫<rt>ねこ</rt></ruby>が<ruby>好<rt>す</rt></ruby>きです。",
                "sentence_en": "I like cats.",
                "word_kanji": "猫",
                "word_furigana": "ねこ",
                "word_en": "cat",
                "extra_kanji": [
                    {"kanji": "好き", "furigana": "すき", "en": "like"}
                ]
            }
        }


class CardsResponse(BaseModel):
    """List of cards response schema."""
    cards: List[Card]
    total: int
