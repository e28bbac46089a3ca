"""Curated learning resources and per-category task templates.

Keys are canonical skill names. Skills without curated resources fall back to
search-style links built from the skill's name.
"""

import re
from urllib.parse import quote

from skillpath.models.schemas.roadmap import Resource, Task
from skillpath.models.schemas.taxonomy import CanonicalSkill

SKILL_RESOURCES: dict[str, list[dict]] = {
    "react": [
        {"type": "documentation", "title": "React Official Documentation", "url": "https://react.dev/learn", "provider": "React"},
        {"type": "tutorial", "title": "React Tutorial for Beginners", "url": "https://react.dev/learn/tutorial-tic-tac-toe", "provider": "React"},
        {"type": "practice", "title": "Build 5 React Projects", "url": "https://github.com/topics/react-projects", "provider": "GitHub"},
    ],
    "typescript": [
        {"type": "documentation", "title": "TypeScript Handbook", "url": "https://www.typescriptlang.org/docs/handbook/", "provider": "Microsoft"},
        {"type": "tutorial", "title": "TypeScript Deep Dive", "url": "https://basarat.gitbook.io/typescript/", "provider": "Basarat"},
        {"type": "practice", "title": "Type Challenges", "url": "https://github.com/type-challenges/type-challenges", "provider": "GitHub"},
    ],
    "nextjs": [
        {"type": "documentation", "title": "Next.js Documentation", "url": "https://nextjs.org/docs", "provider": "Vercel"},
        {"type": "tutorial", "title": "Learn Next.js", "url": "https://nextjs.org/learn", "provider": "Vercel"},
        {"type": "practice", "title": "Build a Full-Stack App with Next.js", "url": "https://nextjs.org/docs/app", "provider": "Vercel"},
    ],
    "nodejs": [
        {"type": "documentation", "title": "Node.js Official Docs", "url": "https://nodejs.org/docs/latest/api/", "provider": "Node.js"},
        {"type": "tutorial", "title": "Node.js Tutorial", "url": "https://nodejs.dev/learn", "provider": "Node.js"},
        {"type": "practice", "title": "Build REST APIs with Node.js", "url": "https://github.com/topics/nodejs-api", "provider": "GitHub"},
    ],
    "postgresql": [
        {"type": "documentation", "title": "PostgreSQL Documentation", "url": "https://www.postgresql.org/docs/", "provider": "PostgreSQL"},
        {"type": "tutorial", "title": "PostgreSQL Tutorial", "url": "https://www.postgresqltutorial.com/", "provider": "PostgreSQL Tutorial"},
        {"type": "practice", "title": "SQL Practice Problems", "url": "https://www.sql-practice.com/", "provider": "SQL Practice"},
    ],
    "docker": [
        {"type": "documentation", "title": "Docker Official Docs", "url": "https://docs.docker.com/get-started/", "provider": "Docker"},
        {"type": "practice", "title": "Dockerize Your Projects", "url": "https://docs.docker.com/samples/", "provider": "Docker"},
    ],
    "aws": [
        {"type": "documentation", "title": "AWS Documentation", "url": "https://docs.aws.amazon.com/", "provider": "AWS"},
        {"type": "tutorial", "title": "AWS Skill Builder", "url": "https://explore.skillbuilder.aws/", "provider": "AWS"},
        {"type": "practice", "title": "AWS Hands-On Labs", "url": "https://aws.amazon.com/getting-started/hands-on/", "provider": "AWS"},
    ],
    "kubernetes": [
        {"type": "documentation", "title": "Kubernetes Documentation", "url": "https://kubernetes.io/docs/home/", "provider": "CNCF"},
        {"type": "tutorial", "title": "Learn Kubernetes Basics", "url": "https://kubernetes.io/docs/tutorials/kubernetes-basics/", "provider": "CNCF"},
        {"type": "practice", "title": "Kubernetes Exercises", "url": "https://github.com/dgkanatsios/CKAD-exercises", "provider": "GitHub"},
    ],
}

# {skill} -> display name, {slug} -> url-safe name
DEFAULT_RESOURCES: list[dict] = [
    {"type": "documentation", "title": "{skill} Official Documentation", "url": "https://www.google.com/search?q={slug}+documentation", "provider": "Various"},
    {"type": "tutorial", "title": "{skill} Beginner Tutorial", "url": "https://www.youtube.com/results?search_query={slug}+tutorial", "provider": "YouTube"},
    {"type": "practice", "title": "Practice {skill} Projects", "url": "https://github.com/topics/{slug}", "provider": "GitHub"},
]

# One template per chunk, in chunk order (a skill is split into at most 3)
CATEGORY_TASKS: dict[str, list[dict]] = {
    "language": [
        {"title": "Learn {skill} syntax basics", "description": "Study core syntax, data types, and control structures", "deliverable": "Complete syntax exercises"},
        {"title": "Build CLI tool with {skill}", "description": "Create a command-line application", "deliverable": "Working CLI tool"},
        {"title": "Solve coding challenges in {skill}", "description": "Practice algorithms and data structures", "deliverable": "10 solved problems"},
    ],
    "framework": [
        {"title": "Setup {skill} project", "description": "Initialize a project with the framework's recommended structure", "deliverable": "Configured project repository"},
        {"title": "Build sample app with {skill}", "description": "Create a complete application using the framework", "deliverable": "Deployed sample app"},
        {"title": "Learn {skill} patterns", "description": "Study common patterns and idioms", "deliverable": "Pattern examples implemented"},
    ],
    "tool": [
        {"title": "Learn {skill} basics", "description": "Study fundamental operations", "deliverable": "Completed exercises"},
        {"title": "Use {skill} in a project", "description": "Adopt the tool in your daily workflow", "deliverable": "Project using {skill}"},
        {"title": "Automate with {skill}", "description": "Script a repeatable workflow around the tool", "deliverable": "Automation checked into a repository"},
    ],
    "platform": [
        {"title": "Setup {skill} environment", "description": "Create an account or local environment and configure the CLI", "deliverable": "Working {skill} setup"},
        {"title": "Deploy application to {skill}", "description": "Deploy a sample application", "deliverable": "Live deployed app"},
        {"title": "Learn {skill} services", "description": "Study core services and their use cases", "deliverable": "Service comparison notes"},
    ],
    "soft_skill": [
        {"title": "Practice {skill}", "description": "Apply it in daily interactions", "deliverable": "Weekly reflection"},
        {"title": "Study {skill} techniques", "description": "Learn proven techniques", "deliverable": "Technique summary"},
        {"title": "Get feedback on {skill}", "description": "Ask peers for structured feedback", "deliverable": "Feedback notes and action items"},
    ],
    "domain": [
        {"title": "Study {skill} theory", "description": "Learn the theoretical foundations", "deliverable": "Summary notes"},
        {"title": "Implement {skill}", "description": "Apply the concept in a project", "deliverable": "Working implementation"},
        {"title": "Write up a {skill} case study", "description": "Document trade-offs met while applying it", "deliverable": "Published write-up"},
    ],
}


def _slug(name: str) -> str:
    return quote(re.sub(r"\s+", "-", name.strip().lower()), safe="-")


def resources_for(skill: CanonicalSkill) -> list[Resource]:
    curated = SKILL_RESOURCES.get(skill.name)
    if curated is not None:
        return [Resource(**entry) for entry in curated]

    label, slug = skill.display_name, _slug(skill.name)
    return [
        Resource(
            title=entry["title"].format(skill=label),
            url=entry["url"].format(slug=slug),
            type=entry["type"],
            provider=entry["provider"],
        )
        for entry in DEFAULT_RESOURCES
    ]


def task_for(skill: CanonicalSkill, index: int, hours: int) -> Task:
    """Task for the ``index``-th chunk of a skill."""
    templates = CATEGORY_TASKS[skill.category]
    template = templates[min(index, len(templates) - 1)]
    label = skill.display_name
    return Task(
        skill=skill.name,
        title=template["title"].format(skill=label),
        description=template["description"].format(skill=label),
        hours=hours,
        deliverable=template["deliverable"].format(skill=label),
    )
