"""Hardcoded page content. Nothing here changes at runtime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class TechStackEntry:
    name: str
    url: str


@dataclass(frozen=True)
class Profile:
    name: str
    tagline: str


@dataclass(frozen=True)
class SocialLink:
    label: str  # screen-reader text
    url: str
    icon: str


@dataclass(frozen=True)
class Section:
    id: str
    title: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Education:
    institution: str
    degree: str
    period: str


@dataclass(frozen=True)
class Project:
    title: str
    summary: str
    highlights: Tuple[str, ...]
    technologies: Tuple[str, ...]
    url: str
    image: str  # file under static/


PROFILE = Profile(
    name="Swayam Bhalotia",
    tagline="Aspiring Full Stack Developer",
)

SOCIAL_LINKS: Tuple[SocialLink, ...] = (
    SocialLink("GitHub", "https://github.com/Qilton", "github"),
    SocialLink("LinkedIn", "https://www.linkedin.com/in/swayam-bhalotia-8b7597318/", "linkedin"),
    SocialLink("Email", "mailto:swayambhalotia@gmail.com", "mail"),
)

TECH_STACK: Tuple[TechStackEntry, ...] = (
    TechStackEntry("MongoDB", "https://www.mongodb.com/"),
    TechStackEntry("Express.js", "https://expressjs.com/"),
    TechStackEntry("React", "https://reactjs.org/"),
    TechStackEntry("Node.js", "https://nodejs.org/"),
    TechStackEntry("GraphQL", "https://graphql.org/"),
    TechStackEntry("TypeScript", "https://www.typescriptlang.org/"),
    TechStackEntry("Docker", "https://www.docker.com/"),
    TechStackEntry("Prisma", "https://www.prisma.io/"),
    TechStackEntry("PostgreSQL", "https://www.postgresql.org/"),
    TechStackEntry("Firebase", "https://firebase.google.com/"),
)

SECTIONS: Tuple[Section, ...] = (
    Section("about", "About Me"),
    Section("tech-stack", "Tech Stack", "Technologies I'm proficient in or currently learning"),
    Section("education", "Education"),
    Section("projects", "Projects", "Showcase of my recent work"),
    Section("skills", "Skills Highlight"),
)

ABOUT = (
    "I'm a first-year B.Tech CSE student at Techno India University, Kolkata. "
    "Passionate about coding and exploring new technologies, I'm constantly pushing "
    "myself to learn and grow in the field of software development. My goal is to "
    "become a proficient full-stack developer and contribute to innovative projects."
)

EDUCATION: Tuple[Education, ...] = (
    Education(
        institution="Techno India University, Kolkata",
        degree="B.Tech in Computer Science and Engineering",
        period="2023 - Present",
    ),
)

PROJECTS: Tuple[Project, ...] = (
    Project(
        title="Project Yogikaa",
        summary=(
            "A comprehensive web application focused on yoga and wellness, showcasing "
            "my skills in modern web development and content management."
        ),
        highlights=(
            "Developed a user-friendly frontend for yoga enthusiasts",
            "Implemented an admin panel for content management",
            "Integrated Firebase for secure video storage and retrieval",
            "Created features for updating photos, videos, and testimonials",
        ),
        technologies=("React", "Node.js", "Firebase", "Content Management System"),
        url="https://yogikaa.com",
        image="Yogika.png",
    ),
)

PROJECTS_NOTE = (
    "More exciting projects are in the works, leveraging my skills in the MERN stack, "
    "GraphQL, TypeScript, Docker, Prisma, and PostgreSQL. Stay tuned for updates!"
)

SKILLS: Tuple[str, ...] = (
    "Full-stack web development with MERN stack",
    "API development using GraphQL",
    "Database management with PostgreSQL and Prisma ORM",
    "Containerization with Docker",
    "Type-safe programming with TypeScript",
    "Version control with Git and GitHub",
    "Content Management System (CMS) development",
    "Cloud storage integration with Firebase",
)


def section(section_id: str) -> Section:
    """Look up a section by id (KeyError if there is none)."""
    for s in SECTIONS:
        if s.id == section_id:
            return s
    raise KeyError(section_id)
