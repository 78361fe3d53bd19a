import math
import re
from typing import Any, Dict, List, Mapping, Optional
from models.cv_models import AnalysisContext, CVAnalysis, FullCVAnalysis
from services.lexicons import GENERIC_SKILLS, LEXICONS, Lexicon, get_lexicon
import logging

logger = logging.getLogger(__name__)

MIN_SUMMARY_LENGTH = 50
MIN_DESCRIPTION_LENGTH = 50
MIN_SKILL_COUNT = 8
MAX_SKILL_SUGGESTIONS = 5

METRICS_PATTERN = re.compile(
    r"\d+[%$]?|\d+\+|increased|decreased|improved|reduced", re.IGNORECASE
)
DIGIT_PATTERN = re.compile(r"\d+")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (unlike built-in round)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(round_half_up(value), 100))


def skill_name(skill: Any) -> str:
    """Skills arrive either as {"name": ...} objects or as plain strings."""
    if isinstance(skill, Mapping):
        name = skill.get("name")
    else:
        name = skill
    return str(name).lower() if name else ""


def cv_content(cv_data: Any) -> Mapping:
    """The "content" object of a CV; anything that is not an object reads as empty."""
    if not isinstance(cv_data, Mapping):
        return {}
    content = cv_data.get("content")
    return content if isinstance(content, Mapping) else {}


def as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


class CVAnalyzer:
    def __init__(self, lexicons: Optional[Mapping[str, Lexicon]] = None):
        self.lexicons = lexicons if lexicons is not None else LEXICONS

    def _lexicon(self, context: Optional[AnalysisContext]) -> Lexicon:
        return get_lexicon(context.language if context else None, self.lexicons)

    def analyze_summary(
        self, summary: Optional[str], context: Optional[AnalysisContext] = None
    ) -> CVAnalysis:
        """
        Score a professional summary and rewrite its weak phrasing.
        """
        summary = as_text(summary)
        if len(summary) < MIN_SUMMARY_LENGTH:
            return CVAnalysis(
                score=20,
                weaknesses=["Summary is too short or missing"],
                suggestions=["Add a compelling professional summary (100-150 words)"],
            )

        lexicon = self._lexicon(context)
        text_lower = summary.lower()
        strengths: List[str] = []
        weaknesses: List[str] = []
        suggestions: List[str] = []
        score = 50

        if any(word in text_lower for word in lexicon.power_words):
            score += 20
            strengths.append("Uses strong action words")
        else:
            weaknesses.append("Lacks impactful action words")
            suggestions.append('Include more power words like "achieved", "led", "improved"')

        if DIGIT_PATTERN.search(summary):
            score += 15
            strengths.append("Includes quantifiable achievements")
        else:
            suggestions.append("Add specific numbers and metrics to demonstrate impact")

        if context and context.industry:
            relevant = [
                keyword for keyword in lexicon.keywords_for(context.industry)
                if keyword.lower() in text_lower
            ]
            if len(relevant) >= 2:
                score += 15
                strengths.append("Contains industry-relevant keywords")
            else:
                suggestions.append(f"Include more {context.industry} industry keywords")

        return CVAnalysis(
            score=min(score, 100),
            strengths=strengths,
            weaknesses=weaknesses,
            suggestions=suggestions,
            improved_content=self.improve_text(summary, context),
        )

    def analyze_experience(
        self, experiences: Optional[List[Dict[str, Any]]],
        context: Optional[AnalysisContext] = None,
    ) -> CVAnalysis:
        """
        Score each experience entry independently and average the results.

        An entry starts at 40 and earns 20 points each for a description of
        at least 50 characters, for containing no weak phrase, and for
        mentioning a metric. An empty description contains no weak phrase,
        so it still earns those 20 points.
        """
        experiences = as_list(experiences)
        if not experiences:
            return CVAnalysis(
                score=0,
                weaknesses=["No work experience listed"],
                suggestions=["Add your work experience with specific achievements"],
            )

        lexicon = self._lexicon(context)
        strengths: List[str] = []
        weaknesses: List[str] = []
        suggestions: List[str] = []
        improved_entries = []
        total = 0

        for entry in experiences:
            fields = entry if isinstance(entry, Mapping) else {}
            description = as_text(fields.get("description"))
            entry_score = 40

            if len(description) < MIN_DESCRIPTION_LENGTH:
                weaknesses.append(f"{fields.get('position') or 'Experience entry'} description is too brief")
                suggestions.append("Expand job descriptions with specific achievements and metrics")
            else:
                entry_score += 20

            description_lower = description.lower()
            if any(phrase in description_lower for phrase in lexicon.weak_phrases):
                weaknesses.append("Uses passive language in job descriptions")
                suggestions.append("Replace passive phrases with strong action verbs")
            else:
                entry_score += 20

            if METRICS_PATTERN.search(description):
                entry_score += 20
                strengths.append("Includes quantifiable achievements")
            else:
                suggestions.append("Add specific metrics and results to demonstrate impact")

            improved_entries.append(self.improve_experience(entry, context))
            total += entry_score

        return CVAnalysis(
            score=clamp_score(total / len(experiences)),
            strengths=strengths,
            weaknesses=weaknesses,
            suggestions=suggestions,
            improved_content=improved_entries,
        )

    def analyze_skills(
        self, skills: Optional[List[Any]], context: Optional[AnalysisContext] = None
    ) -> CVAnalysis:
        """Score the skills list and propose up to five skills to add."""
        skills = as_list(skills)
        if not skills:
            return CVAnalysis(
                score=0,
                weaknesses=["No skills listed"],
                suggestions=["Add relevant technical and soft skills"],
            )

        lexicon = self._lexicon(context)
        strengths: List[str] = []
        suggestions: List[str] = []
        score = 60

        if len(skills) >= MIN_SKILL_COUNT:
            score += 20
            strengths.append("Good variety of skills listed")
        else:
            suggestions.append("Add more skills to demonstrate breadth of expertise")

        if context and context.industry:
            keywords = lexicon.keywords_for(context.industry)
            relevant = [
                skill for skill in skills
                if any(keyword.lower() in skill_name(skill) for keyword in keywords)
            ]
            if len(relevant) >= 3:
                score += 20
                strengths.append("Skills are relevant to target industry")
            else:
                suggestions.append(f"Add more {context.industry}-specific skills")

        return CVAnalysis(
            score=min(score, 100),
            strengths=strengths,
            suggestions=suggestions,
            improved_content=self.suggest_additional_skills(skills, context),
        )

    def analyze_full_cv(
        self, cv_data: Optional[Dict[str, Any]], context: Optional[AnalysisContext] = None
    ) -> FullCVAnalysis:
        """
        Run every section analyzer and combine the scores
        """
        content = cv_content(cv_data)

        section_analyses = {
            "summary": self.analyze_summary(content.get("summary") or "", context),
            "experience": self.analyze_experience(content.get("experience") or [], context),
            "skills": self.analyze_skills(content.get("skills") or [], context),
        }

        scores = [analysis.score for analysis in section_analyses.values()]
        overall_score = round_half_up(sum(scores) / len(scores))

        recommendations = []
        if overall_score < 60:
            recommendations.append("Focus on adding quantifiable achievements and metrics")
            recommendations.append("Use stronger action verbs throughout your CV")
        if overall_score < 80:
            recommendations.append("Tailor content more specifically to your target role")
            recommendations.append("Add more industry-relevant keywords")

        logger.debug(f"Full CV analysis scores: {scores} -> {overall_score}")

        return FullCVAnalysis(
            overall_score=overall_score,
            section_analyses=section_analyses,
            recommendations=recommendations,
        )

    def improve_text(self, text: str, context: Optional[AnalysisContext] = None) -> str:
        """
        Rewrite weak phrases using the language's replacement table.

        Rules run in table order over the output of the previous rule, so a
        replacement can be matched again by a later rule.
        """
        lexicon = self._lexicon(context)
        rules = list(lexicon.replacements)
        if context and context.industry == "tech":
            rules.extend(lexicon.tech_replacements)

        improved = text
        for phrase, replacement in rules:
            improved = re.sub(
                re.escape(phrase), lambda _match, r=replacement: r, improved,
                flags=re.IGNORECASE,
            )
        return improved

    def improve_experience(
        self, entry: Dict[str, Any], context: Optional[AnalysisContext] = None
    ) -> Any:
        if not isinstance(entry, Mapping):
            return entry
        improved = dict(entry)
        if as_text(entry.get("description")):
            improved["description"] = self.improve_text(entry["description"], context)
        return improved

    def suggest_additional_skills(
        self, skills: List[Any], context: Optional[AnalysisContext] = None
    ) -> List[str]:
        current = [skill_name(skill) for skill in skills]
        suggestions = []

        if context and context.industry:
            for keyword in self._lexicon(context).keywords_for(context.industry):
                if not any(keyword.lower() in name for name in current):
                    suggestions.append(keyword)

        for skill in GENERIC_SKILLS:
            if not any(skill.lower() in name for name in current):
                suggestions.append(skill)

        return suggestions[:MAX_SKILL_SUGGESTIONS]
