"""Curated phrase catalogue - quick-send vendor phrases grouped by category."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Literal, Mapping, Optional

from street_translator.core import Language, SUPPORTED_LANGUAGES

PhraseCategory = Literal["greetings", "prices", "products", "questions", "thanks"]


@dataclass(frozen=True)
class PhraseEntry:
    """A catalogue phrase with its text in every supported language."""

    id: str
    category: PhraseCategory
    translations: Mapping[Language, str]

    def __post_init__(self):
        missing = {info.code for info in SUPPORTED_LANGUAGES} - set(self.translations)
        if missing:
            raise ValueError(f"Phrase {self.id!r} is missing {sorted(m.value for m in missing)}")
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))

    def text(self, language: Language) -> str:
        return self.translations[language]


@dataclass(frozen=True)
class CategoryLabel:
    """Portuguese label and icon shown for a category."""

    pt: str
    icon: str


CATEGORY_LABELS: Mapping[PhraseCategory, CategoryLabel] = MappingProxyType({
    "greetings": CategoryLabel(pt="Saudações", icon="👋"),
    "prices": CategoryLabel(pt="Preços", icon="💰"),
    "products": CategoryLabel(pt="Produtos", icon="🥥"),
    "questions": CategoryLabel(pt="Perguntas", icon="❓"),
    "thanks": CategoryLabel(pt="Agradecimentos", icon="🙏"),
})


def _phrase(id: str, category: PhraseCategory, pt: str, en: str, es: str) -> PhraseEntry:
    return PhraseEntry(
        id=id,
        category=category,
        translations={Language.PT_BR: pt, Language.EN_US: en, Language.ES_ES: es},
    )


COMMON_PHRASES: tuple[PhraseEntry, ...] = (
    # Greetings
    _phrase("greeting_hello", "greetings",
            "Olá! Como posso ajudar?", "Hello! How can I help you?", "¡Hola! ¿Cómo puedo ayudarte?"),
    _phrase("greeting_good_morning", "greetings",
            "Bom dia!", "Good morning!", "¡Buenos días!"),
    _phrase("greeting_good_afternoon", "greetings",
            "Boa tarde!", "Good afternoon!", "¡Buenas tardes!"),

    # Prices
    _phrase("price_how_much", "prices",
            "Quanto custa?", "How much does it cost?", "¿Cuánto cuesta?"),
    _phrase("price_5_reais", "prices",
            "Custa 5 reais", "It costs 5 reais", "Cuesta 5 reales"),
    _phrase("price_10_reais", "prices",
            "Custa 10 reais", "It costs 10 reais", "Cuesta 10 reales"),
    _phrase("price_discount", "prices",
            "Posso fazer um desconto", "I can give you a discount", "Puedo hacer un descuento"),
    _phrase("price_accept_card", "prices",
            "Aceito cartão e PIX", "I accept card and PIX", "Acepto tarjeta y PIX"),

    # Products
    _phrase("product_coconut_water", "products",
            "Água de coco gelada", "Cold coconut water", "Agua de coco fría"),
    _phrase("product_ice_cream", "products",
            "Picolé de frutas", "Fruit popsicle", "Paleta de frutas"),
    _phrase("product_beer", "products",
            "Cerveja gelada", "Cold beer", "Cerveza fría"),
    _phrase("product_water", "products",
            "Água mineral", "Mineral water", "Agua mineral"),
    _phrase("product_snacks", "products",
            "Salgadinhos e petiscos", "Snacks and appetizers", "Aperitivos y bocadillos"),
    _phrase("product_handicraft", "products",
            "Artesanato local", "Local handicrafts", "Artesanía local"),

    # Questions
    _phrase("question_want_buy", "questions",
            "Gostaria de comprar?", "Would you like to buy?", "¿Te gustaría comprar?"),
    _phrase("question_cold", "questions",
            "Quer bem gelado?", "Do you want it very cold?", "¿Lo quieres bien frío?"),
    _phrase("question_flavor", "questions",
            "Qual sabor você prefere?", "Which flavor do you prefer?", "¿Qué sabor prefieres?"),
    _phrase("question_quantity", "questions",
            "Quantos você quer?", "How many do you want?", "¿Cuántos quieres?"),

    # Thanks
    _phrase("thanks_thank_you", "thanks",
            "Obrigado! Volte sempre!", "Thank you! Come back soon!", "¡Gracias! ¡Vuelve pronto!"),
    _phrase("thanks_good_day", "thanks",
            "Tenha um ótimo dia!", "Have a great day!", "¡Que tengas un gran día!"),
    _phrase("thanks_enjoy", "thanks",
            "Aproveite a praia!", "Enjoy the beach!", "¡Disfruta la playa!"),
)


def phrases_by_category(category: PhraseCategory) -> List[PhraseEntry]:
    return [phrase for phrase in COMMON_PHRASES if phrase.category == category]


def phrase_by_id(phrase_id: str) -> Optional[PhraseEntry]:
    for phrase in COMMON_PHRASES:
        if phrase.id == phrase_id:
            return phrase
    return None


def search_phrases(query: str, language: Language) -> List[PhraseEntry]:
    """Case-insensitive substring search over one language column."""
    lowered = query.lower()
    return [
        phrase for phrase in COMMON_PHRASES
        if lowered in phrase.translations[language].lower()
    ]
