"""
Job-title synonym groups used to widen keyword search recall.
Each key is a canonical term; the list holds related terms. Back-references
are not required here: the expander restores symmetry at lookup time.
"""

JOB_SYNONYMS = {
    # Software / tech
    "developer": ["engineer", "programmer", "coder", "sde", "software", "dev", "frontend", "backend", "fullstack", "full stack", "full-stack"],
    "engineer": ["developer", "sde", "software", "programmer", "architect", "dev"],
    "sde": ["software", "developer", "engineer", "programmer"],
    "software": ["sde", "developer", "engineer", "programmer", "tech"],
    "frontend": ["front-end", "front end", "ui", "react", "angular", "vue", "web developer"],
    "backend": ["back-end", "back end", "server", "api", "node", "java", "python"],
    "fullstack": ["full-stack", "full stack", "full stack developer", "fullstack developer"],

    # Management
    "manager": ["management", "lead", "head", "director", "supervisor", "team lead"],
    "lead": ["manager", "team lead", "technical lead", "tech lead"],
    "director": ["head", "manager", "vp", "vice president"],

    # Design
    "designer": ["design", "ui", "ux", "graphic", "visual", "product designer"],
    "ux": ["ui", "designer", "user experience", "product designer"],
    "ui": ["ux", "designer", "user interface", "frontend"],

    # Data
    "data": ["analyst", "scientist", "engineer", "analytics", "bi", "database"],
    "analyst": ["data", "business analyst", "analytics", "bi"],
    "scientist": ["data scientist", "ml", "machine learning", "ai"],

    # Marketing / sales
    "marketing": ["digital marketing", "growth", "seo", "social media", "content"],
    "sales": ["business development", "account manager", "sales executive"],

    # HR / admin
    "hr": ["human resources", "recruiter", "talent", "people"],
    "recruiter": ["hr", "talent acquisition", "hiring"],

    # Construction / engineering trades
    "civil": ["civil engineer", "construction", "site", "structural"],
    "mechanical": ["mechanical engineer", "production", "manufacturing"],
    "electrical": ["electrical engineer", "electronics", "eee"],
    "welder": ["welding", "fabricator", "pipe welder", "tig welder", "arc welder"],
    "driver": ["heavy driver", "light driver", "operator", "chauffeur"],
    "operator": ["crane operator", "forklift operator", "equipment operator", "driver"],
    "technician": ["mechanic", "maintenance", "service technician", "fitter"],
    "safety": ["hse", "safety officer", "safety supervisor", "health and safety"],

    # Seniority
    "intern": ["internship", "trainee", "fresher"],
    "fresher": ["entry level", "junior", "trainee", "intern"],
    "senior": ["sr", "lead", "principal", "expert"],
    "junior": ["jr", "entry level", "fresher"],
}
