import pytest

from signalwire_skill.errors import ContentError, UnknownCategory
from signalwire_skill.frontmatter import split_frontmatter
from signalwire_skill.models import Category, Document, SkillMetadata, TriggerTerm, extract_title


def test_split_frontmatter_returns_header_and_body():
    header, body = split_frontmatter("---\nname: x\ntriggers: [A, B]\n---\n\n# Title\ntext\n")
    assert header == {"name": "x", "triggers": ["A", "B"]}
    assert body == "# Title\ntext\n"


def test_split_frontmatter_without_header():
    text = "# Just markdown\n---\nnot a header\n"
    assert split_frontmatter(text) == ({}, text)


@pytest.mark.parametrize(
    "text",
    [
        "---\nname: x\n",  # never closed
        "---\n- a\n- b\n---\nbody",  # not a mapping
        "---\nname: [unclosed\n---\nbody",  # bad yaml
    ],
)
def test_split_frontmatter_rejects_malformed_headers(text):
    with pytest.raises(ContentError):
        split_frontmatter(text)


def test_category_parse():
    assert Category.parse("Reference") is Category.REFERENCE
    assert Category.parse("examples") is Category.EXAMPLE
    assert Category.parse(Category.PATTERN) is Category.PATTERN
    with pytest.raises(UnknownCategory):
        Category.parse("recipes")


def test_document_requires_body_and_derives_title():
    doc = Document(name="patterns/x", category=Category.PATTERN, body="```\n# not a title\n```\n## Real title\n")
    assert doc.title == "Real title"
    assert Document(name="patterns/y", category=Category.PATTERN, body="no heading").title == "y"
    with pytest.raises(ContentError):
        Document(name="patterns/z", category=Category.PATTERN, body=" \n ")


def test_extract_title_none_without_heading():
    assert extract_title("plain text") is None


def test_trigger_term_coerce():
    assert TriggerTerm.coerce("SWML") == TriggerTerm("SWML", 1.0)
    assert TriggerTerm.coerce({"term": "voice agent", "weight": 0.4}) == TriggerTerm("voice agent", 0.4)
    for bad in (42, {"weight": 1}, {"term": "x", "weight": "heavy"}, {"term": "x", "weight": 0}):
        with pytest.raises(ContentError):
            TriggerTerm.coerce(bad)


def test_skill_metadata_from_header():
    meta = SkillMetadata.from_header(
        {
            "name": "signalwire-agents",
            "description": "Build\n  voice agents",
            "activation": "Use when...",
            "version": 1.0,
            "triggers": ["AgentBase", {"term": "voice ai", "weight": 0.5}],
        }
    )
    assert meta.description == "Build voice agents"
    assert meta.version == "1.0"
    assert [t.term for t in meta.rule.terms] == ["AgentBase", "voice ai"]


@pytest.mark.parametrize(
    "header",
    [{"description": "d"}, {"name": "n", "description": ""}, {"name": "n", "description": "d", "triggers": "AgentBase"}],
)
def test_skill_metadata_rejects_incomplete_headers(header):
    with pytest.raises(ContentError):
        SkillMetadata.from_header(header)
