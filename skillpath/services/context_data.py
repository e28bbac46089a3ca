"""Phrases that imply skills a job posting never names outright.

Values are canonical skill names; skills missing from the active taxonomy
are skipped when inferring.
"""

# Broad terms in the posting body and the concrete skills they stand for
CONTEXTUAL_SKILL_MAP: dict[str, list[str]] = {
    "javascript frameworks": ["react", "vuejs", "angular", "javascript"],
    "js frameworks": ["react", "vuejs", "angular", "javascript"],
    "modern javascript": ["javascript", "typescript", "react"],
    "frontend frameworks": ["react", "vuejs", "angular", "nextjs"],
    "front-end frameworks": ["react", "vuejs", "angular", "nextjs"],
    "backend frameworks": ["nodejs", "expressjs", "django", "spring boot"],
    "back-end frameworks": ["nodejs", "expressjs", "django", "spring boot"],
    "web applications": ["javascript", "html", "css", "react"],
    "web development": ["javascript", "html", "css", "react", "nodejs"],
    "full-stack": ["javascript", "nodejs", "react", "postgresql"],
    "full stack": ["javascript", "nodejs", "react", "postgresql"],
    "relational databases": ["postgresql", "mysql", "sql"],
    "nosql databases": ["mongodb", "redis", "dynamodb"],
    "cloud services": ["aws", "azure", "gcp"],
    "cloud platforms": ["aws", "azure", "gcp"],
    "ci/cd pipelines": ["ci/cd", "github", "docker"],
    "devops practices": ["docker", "ci/cd", "linux", "kubernetes"],
    "agile methodologies": ["agile", "project management"],
    "agile environment": ["agile", "team collaboration"],
    "version control": ["git", "github"],
    "api development": ["rest api", "nodejs", "api design"],
    "restful services": ["rest api", "api design"],
    "microservices architecture": ["microservices", "docker", "kubernetes"],
    "responsive web": ["responsive design", "css", "html"],
    "mobile-responsive": ["responsive design", "css"],
    "cross-browser": ["html", "css", "javascript"],
    "single page applications": ["react", "vuejs"],
    "server-side rendering": ["nextjs"],
    "state management": ["state management", "react"],
    "design systems": ["css", "storybook"],
    "unit testing": ["unit testing", "jest"],
    "test-driven": ["unit testing", "jest"],
    "e2e testing": ["integration testing", "cypress", "playwright"],
    "end-to-end testing": ["integration testing", "cypress"],
    "sql databases": ["sql", "postgresql", "mysql"],
    "orm": ["prisma", "database design"],
    "authentication systems": ["authentication", "oauth", "jwt"],
    "security best practices": ["security", "authentication"],
    "performance tuning": ["performance optimization", "caching"],
    "scalable applications": ["microservices", "caching", "database design"],
}

# Role names looked for in the title area of a posting
ROLE_IMPLIED_SKILLS: dict[str, list[str]] = {
    "frontend": ["javascript", "html", "css", "react", "responsive design", "ui/ux"],
    "front-end": ["javascript", "html", "css", "react", "responsive design", "ui/ux"],
    "front end": ["javascript", "html", "css", "react", "responsive design", "ui/ux"],
    "backend": ["nodejs", "sql", "rest api", "database design", "api design"],
    "back-end": ["nodejs", "sql", "rest api", "database design", "api design"],
    "back end": ["nodejs", "sql", "rest api", "database design", "api design"],
    "fullstack": ["javascript", "nodejs", "react", "sql", "rest api", "git"],
    "full-stack": ["javascript", "nodejs", "react", "sql", "rest api", "git"],
    "full stack": ["javascript", "nodejs", "react", "sql", "rest api", "git"],
    "devops": ["docker", "kubernetes", "ci/cd", "linux", "aws", "terraform"],
    "data engineer": ["python", "sql", "aws", "data analysis"],
    "data scientist": ["python", "machine learning", "pandas", "numpy", "data analysis"],
    "mobile developer": ["react native", "javascript", "ios development", "android development"],
    "software engineer": ["git", "unit testing", "problem solving"],
    "web developer": ["javascript", "html", "css", "git", "responsive design"],
}
