"""
Per-language word tables used by the CV analyzer.

All tables are built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_LANGUAGE = "en"

INDUSTRIES: Tuple[str, ...] = ("tech", "marketing", "finance", "healthcare", "sales")

GENERIC_SKILLS: Tuple[str, ...] = (
    "Leadership",
    "Communication",
    "Problem Solving",
    "Project Management",
    "Team Collaboration",
)

# Tech vocabulary is shared across languages
_TECH_KEYWORDS = (
    "javascript", "python", "react", "node.js", "aws", "docker", "kubernetes",
    "api", "database", "agile", "scrum",
)


@dataclass(frozen=True)
class Lexicon:
    industry_keywords: Mapping[str, Tuple[str, ...]]
    power_words: Tuple[str, ...]
    weak_phrases: Tuple[str, ...]
    # (phrase, replacement) pairs, applied in order
    replacements: Tuple[Tuple[str, str], ...]
    tech_replacements: Tuple[Tuple[str, str], ...]

    def keywords_for(self, industry) -> Tuple[str, ...]:
        if not industry:
            return ()
        return self.industry_keywords.get(industry, ())


_EN = Lexicon(
    industry_keywords=MappingProxyType({
        "tech": _TECH_KEYWORDS,
        "marketing": (
            "seo", "sem", "analytics", "campaign", "conversion", "roi", "brand",
            "social media", "content", "lead generation",
        ),
        "finance": (
            "financial analysis", "budgeting", "forecasting", "excel", "sql",
            "risk management", "compliance", "audit",
        ),
        "healthcare": (
            "patient care", "medical", "clinical", "hipaa", "emr", "healthcare",
            "diagnosis", "treatment",
        ),
        "sales": (
            "crm", "lead generation", "pipeline", "quota", "revenue",
            "client relationship", "negotiation", "closing",
        ),
    }),
    power_words=(
        "achieved", "improved", "increased", "decreased", "developed", "implemented",
        "led", "managed", "created", "designed", "optimized", "streamlined",
        "delivered", "exceeded", "spearheaded", "transformed", "innovated",
        "collaborated", "mentored", "established",
    ),
    weak_phrases=(
        "responsible for", "worked on", "helped with", "assisted", "participated",
        "involved in", "duties included", "tasks included", "did", "handled",
    ),
    replacements=(
        ("responsible for", "managed and delivered"),
        ("worked on", "developed and implemented"),
        ("helped with", "contributed to"),
        ("good at", "expert in"),
        ("experienced in", "proven expertise in"),
    ),
    tech_replacements=(
        ("software", "scalable software solutions"),
        ("applications", "high-performance applications"),
    ),
)

_ES = Lexicon(
    industry_keywords=MappingProxyType({
        "tech": _TECH_KEYWORDS,
        "marketing": (
            "seo", "sem", "analítica", "campaña", "conversión", "roi", "marca",
            "redes sociales", "contenido", "generación de leads",
        ),
        "finance": (
            "análisis financiero", "presupuesto", "previsión", "excel", "sql",
            "gestión de riesgos", "cumplimiento", "auditoría",
        ),
        "healthcare": (
            "atención al paciente", "médico", "clínico", "historia clínica",
            "salud", "diagnóstico", "tratamiento",
        ),
        "sales": (
            "crm", "generación de leads", "embudo", "cuota", "ingresos",
            "relación con clientes", "negociación", "cierre",
        ),
    }),
    power_words=(
        "logré", "logrado", "mejoré", "aumenté", "reduje", "desarrollé",
        "implementé", "lideré", "dirigí", "gestioné", "creé", "diseñé",
        "optimicé", "entregué", "superé", "transformé", "innové", "colaboré",
        "asesoré", "establecí",
    ),
    weak_phrases=(
        "responsable de", "trabajé en", "ayudé con", "asistí", "participé",
        "involucrado en", "funciones incluían", "tareas incluían", "me encargué",
    ),
    replacements=(
        ("responsable de", "gestioné y entregué"),
        ("trabajé en", "desarrollé e implementé"),
        ("ayudé con", "contribuí a"),
        ("bueno en", "experto en"),
        ("con experiencia en", "con experiencia demostrada en"),
    ),
    tech_replacements=(
        ("software", "soluciones de software escalables"),
        ("aplicaciones", "aplicaciones de alto rendimiento"),
    ),
)

_FR = Lexicon(
    industry_keywords=MappingProxyType({
        "tech": _TECH_KEYWORDS,
        "marketing": (
            "seo", "sem", "analytique", "campagne", "conversion", "roi", "marque",
            "réseaux sociaux", "contenu", "génération de leads",
        ),
        "finance": (
            "analyse financière", "budgétisation", "prévision", "excel", "sql",
            "gestion des risques", "conformité", "audit",
        ),
        "healthcare": (
            "soins aux patients", "médical", "clinique", "dossier médical",
            "santé", "diagnostic", "traitement",
        ),
        "sales": (
            "crm", "génération de leads", "pipeline", "quota", "chiffre d'affaires",
            "relation client", "négociation", "closing",
        ),
    }),
    power_words=(
        "réalisé", "atteint", "amélioré", "augmenté", "réduit", "développé",
        "mis en œuvre", "dirigé", "géré", "créé", "conçu", "optimisé", "livré",
        "dépassé", "transformé", "innové", "collaboré", "encadré", "établi",
    ),
    weak_phrases=(
        "responsable de", "travaillé sur", "aidé à", "assisté", "participé",
        "impliqué dans", "tâches incluant", "chargé de",
    ),
    replacements=(
        ("responsable de", "piloté et livré"),
        ("travaillé sur", "développé et mis en œuvre"),
        ("aidé à", "contribué à"),
        ("bon en", "expert en"),
        ("expérimenté en", "expertise reconnue en"),
    ),
    tech_replacements=(
        ("logiciel", "solutions logicielles évolutives"),
        ("applications", "applications haute performance"),
    ),
)

_DE = Lexicon(
    industry_keywords=MappingProxyType({
        "tech": _TECH_KEYWORDS,
        "marketing": (
            "seo", "sem", "analytik", "kampagne", "konversion", "roi", "marke",
            "soziale medien", "inhalte", "leadgenerierung",
        ),
        "finance": (
            "finanzanalyse", "budgetierung", "prognose", "excel", "sql",
            "risikomanagement", "compliance", "prüfung",
        ),
        "healthcare": (
            "patientenversorgung", "medizinisch", "klinisch", "patientenakte",
            "gesundheitswesen", "diagnose", "behandlung",
        ),
        "sales": (
            "crm", "leadgenerierung", "pipeline", "quote", "umsatz",
            "kundenbeziehung", "verhandlung", "abschluss",
        ),
    }),
    power_words=(
        "erreicht", "verbessert", "gesteigert", "reduziert", "entwickelt",
        "implementiert", "geleitet", "geführt", "verwaltet", "erstellt",
        "gestaltet", "optimiert", "geliefert", "übertroffen", "transformiert",
        "etabliert",
    ),
    weak_phrases=(
        "verantwortlich für", "gearbeitet an", "geholfen bei", "unterstützt",
        "teilgenommen", "beteiligt an", "aufgaben umfassten", "zuständig für",
    ),
    replacements=(
        ("verantwortlich für", "leitete und lieferte"),
        ("gearbeitet an", "entwickelt und umgesetzt"),
        ("geholfen bei", "beigetragen zu"),
        ("gut in", "Experte in"),
        ("erfahren in", "nachgewiesene Expertise in"),
    ),
    tech_replacements=(
        ("software", "skalierbare Softwarelösungen"),
        ("anwendungen", "hochperformante Anwendungen"),
    ),
)

LEXICONS: Mapping[str, Lexicon] = MappingProxyType({
    "en": _EN,
    "es": _ES,
    "fr": _FR,
    "de": _DE,
})


def get_lexicon(language, lexicons: Mapping[str, Lexicon] = LEXICONS) -> Lexicon:
    """Return the lexicon for a language code, falling back to English."""
    return lexicons.get(language or DEFAULT_LANGUAGE, lexicons[DEFAULT_LANGUAGE])
