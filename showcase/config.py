import os


def _env(name, default):
    return os.environ.get(name, default)


def _env_flag(name, default="false"):
    return _env(name, default).lower() in ("1", "true", "yes", "on")


class Config(object):
    """
    config for the project showcase service and form client
    """

    # database
    DATABASE_URL = _env("DATABASE_URL", "sqlite:///./showcase.db")
    RESET_DB = _env_flag("RESET_DB")
    SQL_ECHO = _env_flag("SQL_ECHO")

    # server
    SERVER_HOST = _env("SERVER_HOST", "0.0.0.0")
    SERVER_PORT = int(_env("SERVER_PORT", "8002"))
    LOG_LEVEL = _env("LOG_LEVEL", "INFO")

    # outbound calls made by the form client
    GITHUB_API_URL = _env("GITHUB_API_URL", "https://api.github.com")
    PROJECTS_API_URL = _env("PROJECTS_API_URL", "http://0.0.0.0:8002")
    REQUEST_TIMEOUT = float(_env("REQUEST_TIMEOUT", "10"))

    # Suggestions offered by the tech stack picker
    COMMON_TECHNOLOGIES = (
        "React",
        "Next.js",
        "TypeScript",
        "JavaScript",
        "Python",
        "Java",
        "Node.js",
        "PostgreSQL",
        "MongoDB",
        "Prisma",
    )
