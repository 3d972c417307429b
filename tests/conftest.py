from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from formatview.schema import FormatterDescriptor, SitemapConfig  # noqa: E402


@pytest.fixture()
def article_config() -> SitemapConfig:
    """Three formatters: two apply to articles, two to pages."""

    return SitemapConfig(
        formatters=(
            FormatterDescriptor(
                key="d1",
                nice_name="Article teaser",
                resource_type_names=("article",),
                container_types=("list", "detail"),
            ),
            FormatterDescriptor(
                key="d2",
                resource_type_names=("article", "page"),
                container_types=("list",),
            ),
            FormatterDescriptor(
                key="d3",
                resource_type_names=("page",),
                container_types=("detail",),
            ),
        )
    )
