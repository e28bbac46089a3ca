"""Bundled skill taxonomy.

Each entry becomes one CanonicalSkill. ``name`` is the unique identity,
``label`` the usual spelling, ``weight`` the 0-1 importance used in ranking,
``trending`` marks skills currently in high demand and ``parent`` groups a
skill under a broader one.
"""

from typing import Any

SKILL_TAXONOMY: list[dict[str, Any]] = [
    # ---------------------------------------------------------------------
    # Programming languages
    # ---------------------------------------------------------------------
    {"name": "javascript", "label": "JavaScript", "category": "language", "weight": 1.0, "trending": True,
     "aliases": ["js", "es6", "es2015", "es2020", "ecmascript", "vanilla js", "vanilla javascript"]},
    {"name": "typescript", "label": "TypeScript", "category": "language", "weight": 1.0, "trending": True,
     "aliases": ["ts", "tsx"], "parent": "javascript"},
    {"name": "python", "label": "Python", "category": "language", "weight": 1.0, "trending": True,
     "aliases": ["py", "python3", "python 3"]},
    {"name": "java", "label": "Java", "category": "language", "weight": 0.9,
     "aliases": ["j2ee", "jdk", "java se", "java ee"]},
    {"name": "c++", "label": "C++", "category": "language", "weight": 0.8,
     "aliases": ["cpp", "c plus plus"]},
    {"name": "c#", "label": "C#", "category": "language", "weight": 0.85,
     "aliases": ["csharp", "c sharp"]},
    {"name": "go", "label": "Go", "category": "language", "weight": 0.9, "trending": True,
     "aliases": ["golang", "go-lang"]},
    {"name": "rust", "label": "Rust", "category": "language", "weight": 0.85, "trending": True,
     "aliases": ["rustlang", "rust-lang"]},
    {"name": "ruby", "label": "Ruby", "category": "language", "weight": 0.7, "aliases": []},
    {"name": "php", "label": "PHP", "category": "language", "weight": 0.6, "aliases": ["php8"]},
    {"name": "swift", "label": "Swift", "category": "language", "weight": 0.8, "aliases": ["swiftui"]},
    {"name": "kotlin", "label": "Kotlin", "category": "language", "weight": 0.8, "aliases": []},
    {"name": "dart", "label": "Dart", "category": "language", "weight": 0.7, "aliases": []},
    {"name": "scala", "label": "Scala", "category": "language", "weight": 0.7, "aliases": []},
    {"name": "r", "label": "R", "category": "language", "weight": 0.7,
     "aliases": ["rstats", "r language"]},
    {"name": "sql", "label": "SQL", "category": "language", "weight": 0.9,
     "aliases": ["structured query language", "t-sql", "pl/sql"]},
    {"name": "html", "label": "HTML", "category": "language", "weight": 0.7, "aliases": ["html5"]},
    {"name": "css", "label": "CSS", "category": "language", "weight": 0.7,
     "aliases": ["css3", "cascading style sheets"]},
    {"name": "sass", "label": "Sass", "category": "language", "weight": 0.6,
     "aliases": ["scss"], "parent": "css"},
    {"name": "bash", "label": "Bash", "category": "language", "weight": 0.7,
     "aliases": ["shell scripting", "shell script"]},

    # ---------------------------------------------------------------------
    # Frameworks and libraries
    # ---------------------------------------------------------------------
    {"name": "react", "label": "React", "category": "framework", "weight": 1.0, "trending": True,
     "aliases": ["reactjs", "react.js", "react js"], "parent": "javascript"},
    {"name": "nextjs", "label": "Next.js", "category": "framework", "weight": 1.0, "trending": True,
     "aliases": ["nextjs"], "parent": "react"},
    {"name": "vuejs", "label": "Vue.js", "category": "framework", "weight": 0.9, "trending": True,
     "aliases": ["vuejs", "vue 3", "vue3"], "parent": "javascript"},
    {"name": "angular", "label": "Angular", "category": "framework", "weight": 0.85,
     "aliases": ["angularjs", "angular 2"], "parent": "typescript"},
    {"name": "svelte", "label": "Svelte", "category": "framework", "weight": 0.8, "trending": True,
     "aliases": ["sveltekit", "svelte kit"], "parent": "javascript"},
    {"name": "jquery", "label": "jQuery", "category": "framework", "weight": 0.5, "aliases": []},
    {"name": "expressjs", "label": "Express.js", "category": "framework", "weight": 0.9,
     "aliases": ["expressjs"], "parent": "nodejs"},
    {"name": "nestjs", "label": "NestJS", "category": "framework", "weight": 0.85, "trending": True,
     "aliases": ["nest.js"], "parent": "nodejs"},
    {"name": "django", "label": "Django", "category": "framework", "weight": 0.85,
     "aliases": ["django rest framework", "drf"], "parent": "python"},
    {"name": "fastapi", "label": "FastAPI", "category": "framework", "weight": 0.9, "trending": True,
     "aliases": ["fast api"], "parent": "python"},
    {"name": "flask", "label": "Flask", "category": "framework", "weight": 0.75, "parent": "python",
     "aliases": []},
    {"name": "spring boot", "label": "Spring Boot", "category": "framework", "weight": 0.9,
     "aliases": ["springboot", "spring", "spring framework"], "parent": "java"},
    {"name": "ruby on rails", "label": "Ruby on Rails", "category": "framework", "weight": 0.75,
     "aliases": ["rails", "ror"], "parent": "ruby"},
    {"name": "dotnet", "label": ".NET", "category": "framework", "weight": 0.85,
     "aliases": ["dotnet core", ".net core", "asp.net", "asp.net core"], "parent": "c#"},
    {"name": "laravel", "label": "Laravel", "category": "framework", "weight": 0.7, "parent": "php",
     "aliases": []},
    {"name": "tailwindcss", "label": "Tailwind CSS", "category": "framework", "weight": 0.9, "trending": True,
     "aliases": ["tailwind", "tailwindcss"], "parent": "css"},
    {"name": "bootstrap", "label": "Bootstrap", "category": "framework", "weight": 0.7,
     "aliases": ["bootstrap 5"], "parent": "css"},
    {"name": "react native", "label": "React Native", "category": "framework", "weight": 0.9, "trending": True,
     "aliases": ["react-native", "expo"], "parent": "react"},
    {"name": "flutter", "label": "Flutter", "category": "framework", "weight": 0.9, "trending": True,
     "aliases": [], "parent": "dart"},
    {"name": "tensorflow", "label": "TensorFlow", "category": "framework", "weight": 0.85,
     "aliases": ["keras"], "parent": "python"},
    {"name": "pytorch", "label": "PyTorch", "category": "framework", "weight": 0.85, "trending": True,
     "aliases": ["torch", "py torch"], "parent": "python"},
    {"name": "scikit-learn", "label": "scikit-learn", "category": "framework", "weight": 0.8,
     "aliases": ["sklearn"], "parent": "python"},
    {"name": "pandas", "label": "Pandas", "category": "framework", "weight": 0.8,
     "aliases": ["dataframes"], "parent": "python"},
    {"name": "numpy", "label": "NumPy", "category": "framework", "weight": 0.75,
     "aliases": [], "parent": "python"},
    {"name": "spark", "label": "Apache Spark", "category": "framework", "weight": 0.85,
     "aliases": ["spark", "pyspark"]},

    # ---------------------------------------------------------------------
    # Platforms: runtimes, clouds, hosted services
    # ---------------------------------------------------------------------
    {"name": "nodejs", "label": "Node.js", "category": "platform", "weight": 1.0, "trending": True,
     "aliases": ["nodejs", "node js"], "parent": "javascript"},
    {"name": "aws", "label": "AWS", "category": "platform", "weight": 1.0, "trending": True,
     "aliases": ["amazon web services", "amazon aws"]},
    {"name": "azure", "label": "Azure", "category": "platform", "weight": 0.95, "trending": True,
     "aliases": ["microsoft azure", "ms azure"]},
    {"name": "gcp", "label": "GCP", "category": "platform", "weight": 0.9, "trending": True,
     "aliases": ["google cloud", "google cloud platform"]},
    {"name": "vercel", "label": "Vercel", "category": "platform", "weight": 0.85, "trending": True,
     "aliases": []},
    {"name": "netlify", "label": "Netlify", "category": "platform", "weight": 0.8, "aliases": []},
    {"name": "heroku", "label": "Heroku", "category": "platform", "weight": 0.7, "aliases": []},
    {"name": "digitalocean", "label": "DigitalOcean", "category": "platform", "weight": 0.75,
     "aliases": ["digital ocean"]},
    {"name": "firebase", "label": "Firebase", "category": "platform", "weight": 0.85,
     "aliases": ["firestore"]},
    {"name": "supabase", "label": "Supabase", "category": "platform", "weight": 0.9, "trending": True,
     "aliases": []},
    {"name": "linux", "label": "Linux", "category": "platform", "weight": 0.85,
     "aliases": ["unix", "ubuntu", "debian", "centos", "rhel"]},
    {"name": "android development", "label": "Android Development", "category": "platform", "weight": 0.8,
     "aliases": ["android", "android sdk"]},
    {"name": "ios development", "label": "iOS Development", "category": "platform", "weight": 0.8,
     "aliases": ["ios"]},
    {"name": "serverless", "label": "Serverless", "category": "platform", "weight": 0.85, "trending": True,
     "aliases": ["aws lambda", "cloud functions", "faas"]},

    # ---------------------------------------------------------------------
    # Tools: databases, build tooling, devops, testing
    # ---------------------------------------------------------------------
    {"name": "postgresql", "label": "PostgreSQL", "category": "tool", "weight": 0.95, "trending": True,
     "aliases": ["postgres", "psql"]},
    {"name": "mysql", "label": "MySQL", "category": "tool", "weight": 0.85, "aliases": ["mariadb"]},
    {"name": "mongodb", "label": "MongoDB", "category": "tool", "weight": 0.9,
     "aliases": ["mongo", "mongoose"]},
    {"name": "redis", "label": "Redis", "category": "tool", "weight": 0.85, "aliases": []},
    {"name": "sqlite", "label": "SQLite", "category": "tool", "weight": 0.7, "aliases": ["sqlite3"]},
    {"name": "dynamodb", "label": "DynamoDB", "category": "tool", "weight": 0.8,
     "aliases": ["dynamo db", "amazon dynamodb"]},
    {"name": "elasticsearch", "label": "Elasticsearch", "category": "tool", "weight": 0.8,
     "aliases": ["elastic search"]},
    {"name": "prisma", "label": "Prisma", "category": "tool", "weight": 0.8, "trending": True,
     "aliases": ["prisma orm"]},
    {"name": "docker", "label": "Docker", "category": "tool", "weight": 1.0, "trending": True,
     "aliases": ["containers", "containerization", "docker compose"]},
    {"name": "kubernetes", "label": "Kubernetes", "category": "tool", "weight": 0.95, "trending": True,
     "aliases": ["k8s", "kube"], "parent": "docker"},
    {"name": "git", "label": "Git", "category": "tool", "weight": 0.95,
     "aliases": ["version control"]},
    {"name": "github", "label": "GitHub", "category": "tool", "weight": 0.9,
     "aliases": ["github actions"], "parent": "git"},
    {"name": "gitlab", "label": "GitLab", "category": "tool", "weight": 0.85,
     "aliases": ["gitlab ci"], "parent": "git"},
    {"name": "ci/cd", "label": "CI/CD", "category": "tool", "weight": 0.9, "trending": True,
     "aliases": ["ci cd", "continuous integration", "continuous deployment", "continuous delivery",
                 "ci/cd pipelines"]},
    {"name": "jenkins", "label": "Jenkins", "category": "tool", "weight": 0.8, "aliases": []},
    {"name": "terraform", "label": "Terraform", "category": "tool", "weight": 0.9, "trending": True,
     "aliases": ["infrastructure as code", "iac"]},
    {"name": "ansible", "label": "Ansible", "category": "tool", "weight": 0.8, "aliases": []},
    {"name": "nginx", "label": "Nginx", "category": "tool", "weight": 0.8, "aliases": []},
    {"name": "jest", "label": "Jest", "category": "tool", "weight": 0.8, "aliases": []},
    {"name": "cypress", "label": "Cypress", "category": "tool", "weight": 0.8, "trending": True,
     "aliases": ["cypress.io"]},
    {"name": "playwright", "label": "Playwright", "category": "tool", "weight": 0.8, "trending": True,
     "aliases": []},
    {"name": "pytest", "label": "pytest", "category": "tool", "weight": 0.8,
     "aliases": ["py.test"], "parent": "python"},
    {"name": "webpack", "label": "Webpack", "category": "tool", "weight": 0.8, "aliases": ["module bundler"]},
    {"name": "vite", "label": "Vite", "category": "tool", "weight": 0.85, "trending": True,
     "aliases": ["vitejs"]},
    {"name": "npm", "label": "npm", "category": "tool", "weight": 0.8, "aliases": []},
    {"name": "eslint", "label": "ESLint", "category": "tool", "weight": 0.75, "aliases": []},
    {"name": "storybook", "label": "Storybook", "category": "tool", "weight": 0.75, "aliases": []},
    {"name": "figma", "label": "Figma", "category": "tool", "weight": 0.7, "trending": True, "aliases": []},
    {"name": "jira", "label": "Jira", "category": "tool", "weight": 0.6, "aliases": []},
    {"name": "jupyter", "label": "Jupyter", "category": "tool", "weight": 0.7,
     "aliases": ["jupyter notebook", "ipython"]},
    {"name": "airflow", "label": "Apache Airflow", "category": "tool", "weight": 0.8,
     "aliases": ["airflow"]},
    {"name": "kafka", "label": "Kafka", "category": "tool", "weight": 0.85,
     "aliases": ["apache kafka"]},
    {"name": "rabbitmq", "label": "RabbitMQ", "category": "tool", "weight": 0.75, "aliases": []},
    {"name": "prometheus", "label": "Prometheus", "category": "tool", "weight": 0.75, "aliases": []},
    {"name": "grafana", "label": "Grafana", "category": "tool", "weight": 0.75, "aliases": []},
    {"name": "sentry", "label": "Sentry", "category": "tool", "weight": 0.7, "aliases": []},

    # ---------------------------------------------------------------------
    # Domain knowledge and engineering concepts
    # ---------------------------------------------------------------------
    {"name": "rest api", "label": "REST API", "category": "domain", "weight": 0.9,
     "aliases": ["rest", "restful", "restful api", "rest apis", "restful apis", "restful services"]},
    {"name": "graphql", "label": "GraphQL", "category": "domain", "weight": 0.85, "trending": True,
     "aliases": ["graph ql", "apollo graphql"]},
    {"name": "websockets", "label": "WebSockets", "category": "domain", "weight": 0.8,
     "aliases": ["websocket", "socket.io"]},
    {"name": "microservices", "label": "Microservices", "category": "domain", "weight": 0.85,
     "aliases": ["micro-services", "microservice architecture", "microservices architecture"]},
    {"name": "oauth", "label": "OAuth", "category": "domain", "weight": 0.8,
     "aliases": ["oauth2", "oauth 2.0", "openid connect", "oidc"]},
    {"name": "jwt", "label": "JWT", "category": "domain", "weight": 0.8,
     "aliases": ["json web token", "json web tokens"]},
    {"name": "unit testing", "label": "Unit Testing", "category": "domain", "weight": 0.85,
     "aliases": ["unit tests", "tdd", "test-driven development", "test driven"]},
    {"name": "integration testing", "label": "Integration Testing", "category": "domain", "weight": 0.8,
     "aliases": ["integration tests", "e2e testing", "end-to-end testing"]},
    {"name": "machine learning", "label": "Machine Learning", "category": "domain", "weight": 0.9,
     "trending": True, "aliases": ["ml"]},
    {"name": "deep learning", "label": "Deep Learning", "category": "domain", "weight": 0.85, "trending": True,
     "aliases": ["neural networks"], "parent": "machine learning"},
    {"name": "nlp", "label": "NLP", "category": "domain", "weight": 0.85, "trending": True,
     "aliases": ["natural language processing"], "parent": "machine learning"},
    {"name": "data analysis", "label": "Data Analysis", "category": "domain", "weight": 0.8, "trending": True,
     "aliases": ["data analytics"]},
    {"name": "data warehousing", "label": "Data Warehousing", "category": "domain", "weight": 0.8,
     "trending": True, "aliases": ["data warehouse", "bigquery", "snowflake", "redshift"]},
    {"name": "responsive design", "label": "Responsive Design", "category": "domain", "weight": 0.85,
     "aliases": ["responsive web design", "mobile-first", "media queries"]},
    {"name": "ui/ux", "label": "UI/UX", "category": "domain", "weight": 0.8, "trending": True,
     "aliases": ["ui ux", "user experience", "user interface design", "ux design", "ui design"]},
    {"name": "accessibility", "label": "Accessibility", "category": "domain", "weight": 0.8, "trending": True,
     "aliases": ["a11y", "wcag"]},
    {"name": "seo", "label": "SEO", "category": "domain", "weight": 0.75,
     "aliases": ["search engine optimization"]},
    {"name": "state management", "label": "State Management", "category": "domain", "weight": 0.85,
     "aliases": ["redux", "zustand", "mobx", "vuex", "pinia"]},
    {"name": "api design", "label": "API Design", "category": "domain", "weight": 0.85,
     "aliases": ["api development", "api architecture"]},
    {"name": "database design", "label": "Database Design", "category": "domain", "weight": 0.85,
     "aliases": ["schema design", "data modeling", "data modelling"]},
    {"name": "authentication", "label": "Authentication", "category": "domain", "weight": 0.85,
     "aliases": ["authorization", "single sign-on", "sso"]},
    {"name": "caching", "label": "Caching", "category": "domain", "weight": 0.8,
     "aliases": ["cdn", "edge caching"]},
    {"name": "message queues", "label": "Message Queues", "category": "domain", "weight": 0.8,
     "aliases": ["message queue", "message broker", "pub/sub", "event-driven"]},
    {"name": "security", "label": "Security", "category": "domain", "weight": 0.85, "trending": True,
     "aliases": ["application security", "appsec", "owasp"]},
    {"name": "performance optimization", "label": "Performance Optimization", "category": "domain",
     "weight": 0.85, "trending": True,
     "aliases": ["web performance", "performance tuning", "core web vitals"]},
    {"name": "observability", "label": "Observability", "category": "domain", "weight": 0.75,
     "aliases": ["monitoring", "apm", "application monitoring"]},
    {"name": "system design", "label": "System Design", "category": "domain", "weight": 0.85,
     "aliases": ["distributed systems", "software architecture", "scalable systems"]},

    # ---------------------------------------------------------------------
    # Soft skills
    # ---------------------------------------------------------------------
    {"name": "communication", "label": "Communication", "category": "soft_skill", "weight": 0.7,
     "aliases": ["communication skills", "verbal communication", "written communication"]},
    {"name": "problem solving", "label": "Problem Solving", "category": "soft_skill", "weight": 0.8,
     "aliases": ["problem-solving", "analytical thinking", "critical thinking", "analytical skills"]},
    {"name": "team collaboration", "label": "Team Collaboration", "category": "soft_skill", "weight": 0.7,
     "aliases": ["teamwork", "collaboration", "team player", "cross-functional"]},
    {"name": "agile", "label": "Agile", "category": "soft_skill", "weight": 0.8,
     "aliases": ["scrum", "kanban", "agile methodology", "agile methodologies", "agile development"]},
    {"name": "leadership", "label": "Leadership", "category": "soft_skill", "weight": 0.75,
     "aliases": ["mentoring", "mentorship", "tech lead", "team lead"]},
    {"name": "project management", "label": "Project Management", "category": "soft_skill", "weight": 0.75,
     "aliases": ["project planning"]},
]

# Lookup keys that are also everyday English words (or a lone letter). In
# running prose they only count when written like a skill name; see
# SkillMentionExtractor.
AMBIGUOUS_TERMS: frozenset[str] = frozenset({
    "go", "r", "next", "node", "express", "rest", "spring",
    "swift", "rust", "dart", "spark", "jest", "flask",
})
