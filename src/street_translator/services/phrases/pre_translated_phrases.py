"""Pre-translated phrase table for zero-cost translation of high-frequency phrases.

Keyed by source language, then by the exact source text as authored, then by
target language. Entries are written per source language, so the table is not
symmetric: most rows exist only for Portuguese, the vendor's language.
"""

from types import MappingProxyType
from typing import Dict, Mapping

from street_translator.core import Language

PT = Language.PT_BR
EN = Language.EN_US
ES = Language.ES_ES


_PORTUGUESE: Dict[str, Dict[Language, str]] = {
    # Saudações
    "Olá": {EN: "Hello", ES: "Hola"},
    "Oi": {EN: "Hi", ES: "Hola"},
    "Bom dia": {EN: "Good morning", ES: "Buenos días"},
    "Boa tarde": {EN: "Good afternoon", ES: "Buenas tardes"},
    "Boa noite": {EN: "Good evening", ES: "Buenas noches"},
    "Como vai?": {EN: "How are you?", ES: "¿Cómo estás?"},
    "Tudo bem?": {EN: "Everything okay?", ES: "¿Todo bien?"},
    "Bem-vindo": {EN: "Welcome", ES: "Bienvenido"},

    # Preços
    "Quanto custa?": {EN: "How much?", ES: "¿Cuánto cuesta?"},
    "Quanto é?": {EN: "How much is it?", ES: "¿Cuánto es?"},
    "Qual o preço?": {EN: "What's the price?", ES: "¿Cuál es el precio?"},
    "Tem desconto?": {EN: "Any discount?", ES: "¿Hay descuento?"},
    "Aceita cartão?": {EN: "Do you accept card?", ES: "¿Aceptas tarjeta?"},
    "Aceito cartão": {EN: "I accept card", ES: "Acepto tarjeta"},
    "Só dinheiro": {EN: "Cash only", ES: "Solo efectivo"},
    "Aceito PIX": {EN: "I accept PIX", ES: "Acepto PIX"},
    "Muito caro": {EN: "Too expensive", ES: "Muy caro"},
    "Está barato": {EN: "It's cheap", ES: "Está barato"},
    "Bom preço": {EN: "Good price", ES: "Buen precio"},
    "Posso fazer desconto": {EN: "I can give a discount", ES: "Puedo hacer descuento"},

    # Números e valores
    "5 reais": {EN: "5 reais", ES: "5 reales"},
    "10 reais": {EN: "10 reais", ES: "10 reales"},
    "20 reais": {EN: "20 reais", ES: "20 reales"},
    "50 reais": {EN: "50 reais", ES: "50 reales"},
    "100 reais": {EN: "100 reais", ES: "100 reales"},
    "Custa 5 reais": {EN: "It costs 5 reais", ES: "Cuesta 5 reales"},
    "Custa 10 reais": {EN: "It costs 10 reais", ES: "Cuesta 10 reales"},

    # Produtos
    "Água de coco": {EN: "Coconut water", ES: "Agua de coco"},
    "Cerveja": {EN: "Beer", ES: "Cerveza"},
    "Água": {EN: "Water", ES: "Agua"},
    "Refrigerante": {EN: "Soda", ES: "Refresco"},
    "Picolé": {EN: "Popsicle", ES: "Paleta"},
    "Sorvete": {EN: "Ice cream", ES: "Helado"},
    "Salgadinho": {EN: "Snack", ES: "Aperitivo"},
    "Artesanato": {EN: "Handicraft", ES: "Artesanía"},
    "Canga": {EN: "Sarong", ES: "Pareo"},
    "Chapéu": {EN: "Hat", ES: "Sombrero"},
    "Óculos de sol": {EN: "Sunglasses", ES: "Gafas de sol"},
    "Protetor solar": {EN: "Sunscreen", ES: "Protector solar"},

    # Perguntas
    "O que é isso?": {EN: "What is this?", ES: "¿Qué es esto?"},
    "Tem outro tamanho?": {EN: "Do you have another size?", ES: "¿Tienes otro tamaño?"},
    "Tem outra cor?": {EN: "Do you have another color?", ES: "¿Tienes otro color?"},
    "Posso ver?": {EN: "Can I see it?", ES: "¿Puedo verlo?"},
    "Posso experimentar?": {EN: "Can I try it?", ES: "¿Puedo probarlo?"},
    "Você tem?": {EN: "Do you have?", ES: "¿Tienes?"},
    "Onde fica?": {EN: "Where is it?", ES: "¿Dónde está?"},
    "Como funciona?": {EN: "How does it work?", ES: "¿Cómo funciona?"},
    "Qual sabor?": {EN: "Which flavor?", ES: "¿Qué sabor?"},
    "Quantos você quer?": {EN: "How many do you want?", ES: "¿Cuántos quieres?"},
    "Gostaria de comprar?": {EN: "Would you like to buy?", ES: "¿Te gustaría comprar?"},

    # Respostas
    "Sim": {EN: "Yes", ES: "Sí"},
    "Não": {EN: "No", ES: "No"},
    "Talvez": {EN: "Maybe", ES: "Quizás"},
    "Claro": {EN: "Sure", ES: "Claro"},
    "Com certeza": {EN: "Definitely", ES: "Definitivamente"},
    "Não sei": {EN: "I don't know", ES: "No sé"},
    "Espera um pouco": {EN: "Wait a moment", ES: "Espera un momento"},
    "Já volto": {EN: "I'll be right back", ES: "Ya vuelvo"},

    # Agradecimentos
    "Obrigado": {EN: "Thank you", ES: "Gracias"},
    "Muito obrigado": {EN: "Thank you very much", ES: "Muchas gracias"},
    "De nada": {EN: "You're welcome", ES: "De nada"},
    "Por favor": {EN: "Please", ES: "Por favor"},
    "Com licença": {EN: "Excuse me", ES: "Disculpe"},
    "Desculpa": {EN: "Sorry", ES: "Lo siento"},

    # Despedidas
    "Tchau": {EN: "Goodbye", ES: "Adiós"},
    "Até logo": {EN: "See you later", ES: "Hasta luego"},
    "Até mais": {EN: "See you", ES: "Hasta pronto"},
    "Volte sempre": {EN: "Come back soon", ES: "Vuelve pronto"},
    "Tenha um bom dia": {EN: "Have a good day", ES: "Que tengas un buen día"},
    "Aproveite": {EN: "Enjoy", ES: "Disfruta"},
    "Aproveite a praia": {EN: "Enjoy the beach", ES: "Disfruta la playa"},

    # Direções
    "À esquerda": {EN: "To the left", ES: "A la izquierda"},
    "À direita": {EN: "To the right", ES: "A la derecha"},
    "Em frente": {EN: "Straight ahead", ES: "Todo recto"},
    "Aqui": {EN: "Here", ES: "Aquí"},
    "Ali": {EN: "There", ES: "Allí"},
    "Perto": {EN: "Near", ES: "Cerca"},
    "Longe": {EN: "Far", ES: "Lejos"},

    # Qualidades
    "Gelado": {EN: "Cold", ES: "Frío"},
    "Quente": {EN: "Hot", ES: "Caliente"},
    "Fresco": {EN: "Fresh", ES: "Fresco"},
    "Novo": {EN: "New", ES: "Nuevo"},
    "Bom": {EN: "Good", ES: "Bueno"},
    "Ótimo": {EN: "Great", ES: "Excelente"},
    "Delicioso": {EN: "Delicious", ES: "Delicioso"},
    "Bonito": {EN: "Beautiful", ES: "Bonito"},

    # Frases completas
    "Olá! Como posso ajudar?": {EN: "Hello! How can I help you?", ES: "¡Hola! ¿Cómo puedo ayudarte?"},
    "Quer bem gelado?": {EN: "Do you want it very cold?", ES: "¿Lo quieres bien frío?"},
    "Qual sabor você prefere?": {EN: "Which flavor do you prefer?", ES: "¿Qué sabor prefieres?"},
    "Aceito cartão e PIX": {EN: "I accept card and PIX", ES: "Acepto tarjeta y PIX"},
    "Obrigado! Volte sempre!": {EN: "Thank you! Come back soon!", ES: "¡Gracias! ¡Vuelve pronto!"},
    "Tenha um ótimo dia!": {EN: "Have a great day!", ES: "¡Que tengas un gran día!"},
    "Está muito quente hoje": {EN: "It's very hot today", ES: "Hace mucho calor hoy"},
    "A praia está linda": {EN: "The beach is beautiful", ES: "La playa está hermosa"},
    "Feito à mão": {EN: "Handmade", ES: "Hecho a mano"},
    "Produto local": {EN: "Local product", ES: "Producto local"},
}

_ENGLISH: Dict[str, Dict[Language, str]] = {
    "Hello": {PT: "Olá", ES: "Hola"},
    "How much?": {PT: "Quanto custa?", ES: "¿Cuánto cuesta?"},
    "Thank you": {PT: "Obrigado", ES: "Gracias"},
    "Yes": {PT: "Sim", ES: "Sí"},
    "No": {PT: "Não", ES: "No"},
    "Goodbye": {PT: "Tchau", ES: "Adiós"},
    "Please": {PT: "Por favor", ES: "Por favor"},
    "Sorry": {PT: "Desculpa", ES: "Lo siento"},
    "Good morning": {PT: "Bom dia", ES: "Buenos días"},
    "How are you?": {PT: "Como vai?", ES: "¿Cómo estás?"},
}

_SPANISH: Dict[str, Dict[Language, str]] = {
    "Hola": {PT: "Olá", EN: "Hello"},
    "¿Cuánto cuesta?": {PT: "Quanto custa?", EN: "How much?"},
    "Gracias": {PT: "Obrigado", EN: "Thank you"},
    "Sí": {PT: "Sim", EN: "Yes"},
    "No": {PT: "Não", EN: "No"},
    "Adiós": {PT: "Tchau", EN: "Goodbye"},
    "Por favor": {PT: "Por favor", EN: "Please"},
    "Lo siento": {PT: "Desculpa", EN: "Sorry"},
    "Buenos días": {PT: "Bom dia", EN: "Good morning"},
    "¿Cómo estás?": {PT: "Como vai?", EN: "How are you?"},
}


def _freeze(table: Dict[str, Dict[Language, str]]) -> Mapping[str, Mapping[Language, str]]:
    return MappingProxyType({text: MappingProxyType(row) for text, row in table.items()})


PRE_TRANSLATED_PHRASES: Mapping[Language, Mapping[str, Mapping[Language, str]]] = MappingProxyType({
    PT: _freeze(_PORTUGUESE),
    EN: _freeze(_ENGLISH),
    ES: _freeze(_SPANISH),
})


def all_pre_translations(from_lang: Language, to_lang: Language) -> Dict[str, str]:
    """Every flat-table phrase that has a translation for the given pair."""
    phrases = PRE_TRANSLATED_PHRASES.get(from_lang, {})
    return {text: row[to_lang] for text, row in phrases.items() if to_lang in row}
