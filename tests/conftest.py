"""
Shared fixtures for the content scoring tests.

All scoring calls are made against a fixed NOW so that "recently published",
recency cut-offs and trending decay are reproducible.
"""

from datetime import datetime, timedelta, timezone

import pytest

from content_scoring.models import BlogPost, PodcastEpisode

NOW = datetime(2025, 1, 20, 12, 0, tzinfo=timezone.utc)

AUTHORS = {
    "1": {"id": "1", "name": "María González", "role": "Directora de Consultoría"},
    "2": {"id": "2", "name": "Carlos Rodríguez", "role": "Consultor Senior"},
    "3": {"id": "3", "name": "Ana Martínez", "role": "Consultora de Gobernanza"},
    "4": {"id": "4", "name": "Diego Fernández", "role": "Transformación Digital"},
}

CATEGORIES = {
    "org": {"id": "1", "name": "Desarrollo Organizacional", "slug": "desarrollo-organizacional"},
    "process": {"id": "2", "name": "Mejora de Procesos", "slug": "mejora-procesos"},
    "erp": {"id": "3", "name": "Sistemas ERP", "slug": "sistemas-erp"},
    "governance": {"id": "4", "name": "Gobernanza Corporativa", "slug": "gobernanza-corporativa"},
}

TAGS = {
    "estrategia": {"id": "1", "name": "Estrategia", "slug": "estrategia"},
    "lean": {"id": "4", "name": "Lean Manufacturing", "slug": "lean-manufacturing"},
    "odoo": {"id": "7", "name": "Odoo", "slug": "odoo"},
    "erp": {"id": "8", "name": "ERP", "slug": "erp"},
    "cultura": {"id": "12", "name": "Cultura Organizacional", "slug": "cultura-organizacional"},
    "pymes": {"id": "15", "name": "PYMES", "slug": "pymes"},
    "transformacion": {"id": "20", "name": "Transformación", "slug": "transformacion"},
}


def days_ago(days: float, now: datetime = NOW) -> datetime:
    return now - timedelta(days=days)


def make_post(
    id: str,
    title: str = "Artículo",
    *,
    author: str = "1",
    category: str = "org",
    tags=(),
    published_days_ago: float = 5,
    reading_time: int = 10,
    views: int = 100,
    featured: bool = False,
    excerpt: str = "",
    content: str = "",
    now: datetime = NOW,
) -> BlogPost:
    return BlogPost.model_validate({
        "id": id,
        "title": title,
        "slug": f"post-{id}",
        "excerpt": excerpt,
        "content": content,
        "coverImage": f"/images/blog/{id}.jpg",
        "author": AUTHORS[author] if author else None,
        "category": CATEGORIES[category],
        "tags": [TAGS[t] for t in tags],
        "publishedAt": days_ago(published_days_ago, now).isoformat(),
        "readingTime": reading_time,
        "views": views,
        "featured": featured,
    })


def make_episode(
    id: str,
    title: str = "Episodio",
    *,
    hosts=("1",),
    guests=(),
    category: str = "org",
    tags=(),
    published_days_ago: float = 5,
    duration: int = 2700,
    plays: int = 100,
    featured: bool = False,
    description: str = "",
    content: str = "",
    now: datetime = NOW,
) -> PodcastEpisode:
    return PodcastEpisode.model_validate({
        "id": id,
        "title": title,
        "slug": f"episode-{id}",
        "description": description,
        "content": content,
        "coverImage": f"/images/podcast/{id}.jpg",
        "audioUrl": f"/audio/{id}.mp3",
        "duration": duration,
        "publishedAt": days_ago(published_days_ago, now).isoformat(),
        "hosts": [AUTHORS[h] for h in hosts],
        "guests": list(guests),
        "category": CATEGORIES[category],
        "tags": [TAGS[t] for t in tags],
        "plays": plays,
        "featured": featured,
    })


@pytest.fixture
def blog_posts():
    """Small blog catalog shaped like the mock CMS content."""
    return [
        make_post(
            "1",
            "Cómo Implementar un Sistema ERP en tu PYME",
            author="4",
            category="erp",
            tags=("odoo", "erp", "pymes"),
            published_days_ago=5,
            reading_time=12,
            views=1840,
            featured=True,
            excerpt="Buenas prácticas para implementar un sistema de gestión.",
            content="La implementación de un sistema de gestión es un proyecto crítico.",
        ),
        make_post(
            "2",
            "Lean Six Sigma para Servicios",
            author="2",
            category="process",
            tags=("lean",),
            published_days_ago=10,
            reading_time=10,
            views=1320,
            excerpt="Mejora continua en empresas de servicios.",
            content="Lean nació en la manufactura pero aplica a los servicios.",
        ),
        make_post(
            "3",
            "Cultura Organizacional: El ADN de tu Empresa",
            author="1",
            category="org",
            tags=("cultura", "transformacion"),
            published_days_ago=36,
            reading_time=16,
            views=720,
            excerpt="La cultura determina cómo se ejecuta la estrategia.",
            content="La cultura organizacional se construye con rituales.",
        ),
    ]


@pytest.fixture
def podcast_episodes():
    """Small podcast catalog shaped like the mock CMS content."""
    return [
        make_episode(
            "ep-1",
            "De PYME Familiar a Corporación",
            hosts=("1",),
            guests=({"id": "g1", "name": "Roberto Sánchez", "company": "TechCorp Latam"},),
            category="org",
            tags=("pymes", "transformacion"),
            published_days_ago=2,
            duration=2850,
            plays=2100,
            featured=True,
            description="Cómo profesionalizar la empresa familiar.",
        ),
        make_episode(
            "ep-2",
            "Lean Manufacturing en la Era Digital",
            hosts=("2",),
            guests=({"id": "g2", "name": "Patricia Morales", "company": "IndustriaXYZ"},),
            category="process",
            tags=("lean",),
            published_days_ago=9,
            duration=3120,
            plays=1650,
            description="Lean y automatización industrial.",
        ),
    ]
