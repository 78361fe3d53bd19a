from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from services.cv_analyzer import CVAnalyzer, cv_content
from services.context_detector import build_context
from services.lexicons import INDUSTRIES, LEXICONS
from models.cv_models import ImproveRequest
import config
import logging


app = FastAPI(title=config.APP_TITLE, version=config.APP_VERSION)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize services
cv_analyzer = CVAnalyzer()

SECTIONS = ("summary", "experience", "skills")

CAPABILITIES = {
    "industries": list(INDUSTRIES),
    "levels": ["entry", "mid", "senior", "executive"],
    "analysisTypes": [*SECTIONS, "full"],
    "languages": list(LEXICONS),
    "features": [
        "Industry-specific keyword optimization",
        "Power word enhancement",
        "Quantifiable achievement detection",
        "Weak language identification",
        "Professional tone improvement",
        "ATS optimization",
        "Skill gap analysis",
        "Overall CV scoring",
    ],
}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.get("/")
async def root():
    return {"message": "CV Analyzer API is working"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "cv_analyzer": "running"
        }
    }


def score_message(section: str, score: int) -> str:
    """Pick the feedback message for a section score."""
    if score >= 80:
        return f"🎉 Excellent {section}! Score: {score}/100. Minor enhancements applied."
    if score >= 60:
        return (
            f"✨ Good {section} with room for improvement! Score: {score}/100. "
            "Enhanced with stronger language and metrics."
        )
    return (
        f"🚀 Significant improvements made to your {section}! Score: {score}/100. "
        "Added impact-focused content."
    )


@app.post("/api/ai/improve")
async def improve_cv(request: ImproveRequest):
    """
    Analyze one CV section (or the whole CV) and return improved content
    """
    section = request.section
    if section not in SECTIONS and section != "full":
        logger.warning(f"Rejected analysis request for section: {section!r}")
        return JSONResponse(status_code=400, content={"error": "Invalid section specified"})

    try:
        cv_data = request.cv_data
        content = cv_content(cv_data)
        context = build_context(
            cv_data,
            target_role=request.target_role,
            industry=request.industry,
            level=request.level,
            language=request.language,
        )
        context_body = context.model_dump(by_alias=True)

        logger.info(f"Analyzing section: {section}")

        if section == "full":
            full_analysis = cv_analyzer.analyze_full_cv(cv_data, context)
            return {
                "success": True,
                "analysis": full_analysis.model_dump(by_alias=True),
                "context": context_body,
                "message": f"CV Analysis Complete! Overall Score: {full_analysis.overall_score}/100",
            }

        if section == "summary":
            analysis = cv_analyzer.analyze_summary(content.get("summary") or "", context)
        elif section == "experience":
            analysis = cv_analyzer.analyze_experience(content.get("experience") or [], context)
        else:
            analysis = cv_analyzer.analyze_skills(content.get("skills") or [], context)

        logger.info(f"Analysis completed for {section}: score {analysis.score}")

        return {
            "success": True,
            "improvement": analysis.improved_content,
            "section": section,
            "analysis": analysis.model_dump(
                include={"score", "strengths", "weaknesses", "suggestions"}
            ),
            "context": context_body,
            "message": score_message(section, analysis.score),
        }

    except Exception as e:
        logger.error(f"AI improvement error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to improve CV content. Please try again."},
        )


@app.get("/api/ai/improve")
async def analysis_capabilities(cvId: Optional[str] = None):
    """Describe what the analyzer supports"""
    if not cvId:
        return JSONResponse(status_code=400, content={"error": "CV ID required"})

    return {"capabilities": CAPABILITIES}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
