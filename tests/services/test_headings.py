from app.schemas.blog import Heading
from app.services.headings import extract_headings, heading_id


def test_extract_headings_returns_levels_in_document_order():
    result = extract_headings("# A\n## B\n### C")

    assert [h.model_dump() for h in result] == [
        {"id": "a", "text": "A", "level": 1},
        {"id": "b", "text": "B", "level": 2},
        {"id": "c", "text": "C", "level": 3},
    ]


def test_extract_headings_handles_all_levels_out_of_order():
    body = "### Deep first\n\n# Top\n\n###### Six\n\n## Second"

    result = extract_headings(body)

    assert [(h.level, h.text) for h in result] == [
        (3, "Deep first"),
        (1, "Top"),
        (6, "Six"),
        (2, "Second"),
    ]


def test_extract_headings_keeps_literal_text_of_inline_formatting():
    body = "## Using **async** and `await` in _practice_\n\nText."

    [heading] = extract_headings(body)

    assert heading.text == "Using async and await in practice"
    assert heading.id == "using-async-and-await-in-practice"


def test_extract_headings_ignores_fenced_code():
    body = "\n".join(
        [
            "# Real",
            "",
            "```bash",
            "# not a heading",
            "```",
            "",
            "## Also real",
        ]
    )

    result = extract_headings(body)

    assert [h.text for h in result] == ["Real", "Also real"]


def test_extract_headings_supports_setext_headings():
    result = extract_headings("Overview\n========\n\nSome text.")

    assert result == [Heading(id="overview", text="Overview", level=1)]


def test_extract_headings_keeps_duplicate_ids_by_default():
    result = extract_headings("## Setup\n\ntext\n\n## Setup\n\nmore")

    assert [h.id for h in result] == ["setup", "setup"]


def test_extract_headings_can_make_ids_unique():
    body = "## Setup\n\n## Usage\n\n## Setup\n\n## Setup"

    result = extract_headings(body, unique=True)

    assert [h.id for h in result] == ["setup", "usage", "setup-1", "setup-2"]


def test_extract_headings_is_idempotent():
    body = "# One\n\n## Two `code`\n"

    assert extract_headings(body) == extract_headings(body)


def test_extract_headings_empty_body():
    assert extract_headings("") == []
    assert extract_headings("Just a paragraph.") == []


def test_extract_headings_unescapes_entities_in_text():
    [heading] = extract_headings("## Q&A session")

    assert heading.text == "Q&A session"
    assert heading.id == "q-a-session"


def test_heading_id_collapses_non_word_runs():
    assert heading_id("N+1 Problem!") == "n-1-problem-"
    assert heading_id("  Hello, World  ") == "-hello-world-"
    assert heading_id("snake_case stays") == "snake_case-stays"
    assert heading_id("Trở về") == "tr-v-"


def test_heading_id_is_deterministic():
    assert heading_id("Dependency Injection 101") == heading_id(
        "Dependency Injection 101"
    )


def test_extract_headings_keeps_trailing_hash_without_space():
    [heading] = extract_headings("## Getting started with C#")

    assert heading.text == "Getting started with C#"
    assert heading.id == "getting-started-with-c-"


def test_extract_headings_strips_closing_hash_sequence():
    [heading] = extract_headings("## Closing hashes ##")

    assert heading.text == "Closing hashes"


def test_extract_headings_needs_space_after_opening_hashes():
    body = "Intro line\n\n#dotnet #csharp\n\n## Real"

    result = extract_headings(body)

    assert [(h.level, h.text) for h in result] == [(2, "Real")]


def test_extract_headings_inside_html_block_after_blank_line():
    body = "<div>\n\n## Inside\n\n</div>\n\n## After"

    result = extract_headings(body)

    assert [h.text for h in result] == ["Inside", "After"]


def test_extract_headings_ignores_fence_nested_in_list_item():
    body = "\n".join(
        [
            "- Install the tools:",
            "",
            "  ```bash",
            "  # comment",
            "  ```",
            "",
            "## Next",
        ]
    )

    result = extract_headings(body)

    assert [h.text for h in result] == ["Next"]
