from __future__ import annotations

from dataclasses import dataclass

from formatview.info import FormatterInfo, wrap_formatter
from formatview.schema import FormatterDescriptor, SitemapConfig


def test_wrap_formatter_exposes_descriptor_fields():
    descriptor = FormatterDescriptor(
        key="teaser",
        id="1f2e",
        nice_name="Teaser",
        description="Short teaser",
        rank=10,
        resource_type_names=("article",),
        container_types=("list", "detail"),
    )
    config = SitemapConfig(formatters=(descriptor,))

    info = wrap_formatter("ctx", config, descriptor)

    assert isinstance(info, FormatterInfo)
    assert info.context == "ctx"
    assert info.config is config
    assert info.key == "teaser"
    assert info.id == "1f2e"
    assert info.label == "Teaser"
    assert info.description == "Short teaser"
    assert info.rank == 10
    assert info.is_active is True
    assert info.resource_type_names == ("article",)
    assert info.container_types == ("list", "detail")
    assert info.supports_container("detail")
    assert not info.supports_container("sidebar")


def test_label_falls_back_to_key():
    descriptor = FormatterDescriptor(key="plain", resource_type_names=("page",))
    info = wrap_formatter(None, SitemapConfig(formatters=(descriptor,)), descriptor)

    assert info.label == "plain"
    assert info.container_types == ()


def test_foreign_descriptor_uses_defaults():
    @dataclass
    class Minimal:
        resource_type_names: set[str]
        container_types: list[str]

    info = wrap_formatter(None, SitemapConfig(), Minimal({"page"}, ["detail"]))

    assert info.key is None
    assert info.id is None
    assert info.label == ""
    assert info.description == ""
    assert info.rank is None
    assert info.is_active is True
    assert info.container_types == ("detail",)


def test_formatter_info_is_hashable_with_mapping_context():
    descriptor = FormatterDescriptor(key="teaser", resource_type_names=("article",))
    config = SitemapConfig(formatters=(descriptor,))
    first = wrap_formatter({"locale": "de"}, config, descriptor)
    second = wrap_formatter({"locale": "de"}, config, descriptor)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
