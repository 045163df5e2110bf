"""
Related posts

The simple blog-only rail shown under an article.

+category_weight for the same category, +tag_weight per shared tag id; posts with no
overlap are dropped; ties go to the newer post.
"""

from typing import List, Sequence

from ..models.content import BlogPost


def get_related_posts(
    current_post_id: str,
    posts: Sequence[BlogPost],
    limit: int = 3,
    category_weight: float = 10.0,
    tag_weight: float = 5.0,
) -> List[BlogPost]:
    """Posts related to current_post_id; [] when the id is unknown."""
    current = next((p for p in posts if p.id == current_post_id), None)
    if current is None:
        return []

    current_tag_ids = {tag.id for tag in current.tags}
    scored = []
    for post in posts:
        if post.id == current_post_id:
            continue
        score = 0.0
        if post.category.id == current.category.id:
            score += category_weight
        score += tag_weight * sum(1 for tag in post.tags if tag.id in current_tag_ids)
        if score > 0:
            scored.append((score, post))

    scored.sort(key=lambda pair: (pair[0], pair[1].published_at), reverse=True)
    return [post for _, post in scored[:limit]]
