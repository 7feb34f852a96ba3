"""seed_categories

Revision ID: 9f4e2b61c8d3
Revises: 3c1d9a7e5b20
Create Date: 2026-10-16 09:20:05.771943

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9f4e2b61c8d3"
down_revision: Union[str, Sequence[str], None] = "3c1d9a7e5b20"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (name, slug, icon, color); ids follow this order
CATEGORIES = [
    ("All", "all", "🌟", "bg-slate-100 hover:bg-slate-200 text-slate-800 dark:bg-slate-700"),
    ("Mindset", "mindset", "🧠", "bg-slate-200 hover:bg-slate-300 text-slate-800 dark:bg-slate-600"),
    ("Productivity", "productivity", "⚡", "bg-slate-300 hover:bg-slate-400 text-slate-900 dark:bg-slate-500"),
    ("Leadership", "leadership", "👑", "bg-slate-400 hover:bg-slate-500 text-white dark:bg-slate-400"),
    ("Learning", "learning", "📚", "bg-slate-500 hover:bg-slate-600 text-white dark:bg-slate-300"),
    ("Wellbeing", "wellbeing", "🌿", "bg-slate-600 hover:bg-slate-700 text-white dark:bg-slate-200"),
    ("Spirituality", "spirituality", "🙏", "bg-slate-700 hover:bg-slate-800 text-white dark:bg-slate-100"),
    ("Relationship", "relationship", "💝", "bg-slate-800 hover:bg-slate-900 text-white dark:bg-slate-50"),
    ("Career", "career", "🚀", "bg-slate-900 hover:bg-black text-white dark:bg-white"),
]


def upgrade() -> None:
    """Seed the fixed category list."""
    categories_table = sa.table(
        "categories",
        sa.column("name", sa.String),
        sa.column("slug", sa.String),
        sa.column("icon", sa.String),
        sa.column("color", sa.String),
    )

    op.bulk_insert(
        categories_table,
        [
            {"name": name, "slug": slug, "icon": icon, "color": color}
            for name, slug, icon, color in CATEGORIES
        ],
    )


def downgrade() -> None:
    """Remove seeded categories."""
    slugs = ", ".join(f"'{slug}'" for _, slug, _, _ in CATEGORIES)
    op.execute(f"DELETE FROM categories WHERE slug IN ({slugs})")
