"""Tests for positioning.outline and positioning.cleaning."""

import pytest

from positioning.cleaning import clean_example, split_dash_segments, strip_quotes
from positioning.outline import (
    BULLETED,
    DEGENERATE_PAIRS,
    FLAT,
    INLINE,
    classify_lines,
    detect_shape,
    match_category,
    merge_repeated_titles,
    parse_outline,
    split_groups,
)
from positioning.models import Item


def _titles(group):
    return [item.title for item in group.items]


def _examples(item):
    return item.example_texts()


# ===========================================================================
# Category headers
# ===========================================================================


class TestCategoryHeaders:
    @pytest.mark.parametrize(
        "line, key",
        [
            ("Typische Ängste:", "fears"),
            ("typische ängste", "fears"),
            ("Typische Ängste – Beispiele:", "fears"),
            ("Sorgen - Beispiele", "fears"),
            ("Typical fears:", "fears"),
            ("Typische Ziele", "goals"),
            ("Wünsche:", "goals"),
            ("Typische Vorurteile:", "objections"),
            ("Einwände", "objections"),
            ("## Typische Ziele", "goals"),
            ("**Typische Ängste:**", "fears"),
        ],
    )
    def test_synonyms_normalize(self, line: str, key: str) -> None:
        match = match_category(line)
        assert match is not None
        assert match[0] == key

    @pytest.mark.parametrize(
        "line",
        ["Ziele erreichen wir gemeinsam", "1. Typische Ziele", "Typische Kunden:", ""],
    )
    def test_non_headers(self, line: str) -> None:
        assert match_category(line) is None

    def test_trailing_text_after_colon(self) -> None:
        groups = parse_outline("Typische Ziele: 1. Mehr Umsatz\n2. Mehr Zeit")
        assert _titles(groups[0]) == ["Mehr Umsatz", "Mehr Zeit"]

    def test_group_order_follows_headers(self) -> None:
        text = "Typische Ziele:\n1. Z\n\nTypische Ängste:\n1. A\n\nTypische Vorurteile:\n1. V"
        groups = parse_outline(text)
        assert [g.key for g in groups] == ["goals", "fears", "objections"]
        assert [g.label for g in groups] == [
            "Typische Ziele",
            "Typische Ängste",
            "Typische Vorurteile",
        ]

    def test_lines_before_first_header_are_ignored(self) -> None:
        groups = parse_outline("Einleitung\n1. Lose Zeile\nTypische Ziele:\n1. Ziel A")
        assert len(groups) == 1
        assert _titles(groups[0]) == ["Ziel A"]

    def test_empty_group_is_omitted(self) -> None:
        groups = parse_outline("Typische Ziele:\n\nTypische Ängste:\n1. Angst A")
        assert [g.key for g in groups] == ["fears"]


# ===========================================================================
# Shape 1: flat numbered list
# ===========================================================================


class TestFlatShape:
    def test_scenario_a_trigger_text(self) -> None:
        groups = parse_outline("Typische Ängste:\n1. Angst A\n2. Angst B", with_examples=False)
        assert len(groups) == 1
        assert groups[0].key == "fears"
        assert groups[0].label == "Typische Ängste"
        assert _titles(groups[0]) == ["Angst A", "Angst B"]
        assert all(item.examples == [] for item in groups[0].items)

    @pytest.mark.parametrize("count", [1, 3, 5])
    def test_titles_verbatim_without_examples(self, count: int) -> None:
        titles = [f"Sorge Nummer {n} bleibt bestehen" for n in range(1, count + 1)]
        body = "\n".join(f"{n}. {t}" for n, t in enumerate(titles, start=1))
        for with_examples in (True, False):
            groups = parse_outline(f"Typische Ängste:\n{body}", with_examples=with_examples)
            assert _titles(groups[0]) == titles
            assert all(not item.examples for item in groups[0].items)

    def test_without_examples_keeps_dashes_in_title(self) -> None:
        groups = parse_outline("Typische Ziele:\n1. Zeit – Geld", with_examples=False)
        assert _titles(groups[0]) == ["Zeit – Geld"]

    def test_without_examples_never_pairs(self) -> None:
        body = "\n".join(f"{n}. Ziel {n}" for n in range(1, 9))
        groups = parse_outline(f"Typische Ziele:\n{body}", with_examples=False)
        assert _titles(groups[0]) == [f"Ziel {n}" for n in range(1, 6)]

    def test_continuation_line_extends_title(self) -> None:
        groups = parse_outline("Typische Ängste:\n1. Eine lange Sorge, die\numgebrochen wurde\n2. B")
        assert _titles(groups[0]) == ["Eine lange Sorge, die umgebrochen wurde", "B"]

    def test_number_on_its_own_line(self) -> None:
        groups = parse_outline("Typische Ängste:\n1.\nAngst A")
        assert _titles(groups[0]) == ["Angst A"]

    def test_sparse_numbering_keeps_encounter_order(self) -> None:
        groups = parse_outline("Typische Ziele:\n3. C\n1. A\n1. B")
        assert _titles(groups[0]) == ["C", "A", "B"]


# ===========================================================================
# Shape 2: numbered items with bullet lines
# ===========================================================================


class TestBulletedShape:
    TEXT = (
        "Typische Ziele – Beispiele:\n"
        "1. Schneller Abschluss\n"
        "- Beispiel 1 zur Beschleunigung\n"
        "• Beispiel 2 zu Prozessen\n"
        "- Beispiel 3 wird abgeschnitten\n"
        "2. Weniger Aufwand\n"
        "* „Endlich Ruhe“"
    )

    def test_bullets_become_examples(self) -> None:
        groups = parse_outline(self.TEXT)
        first, second = groups[0].items
        assert first.title == "Schneller Abschluss"
        assert _examples(first) == ["Beispiel 1 zur Beschleunigung", "Beispiel 2 zu Prozessen"]
        assert second.title == "Weniger Aufwand"
        assert _examples(second) == ["Endlich Ruhe"]

    def test_redundant_title_prefix_is_stripped(self) -> None:
        groups = parse_outline("Typische Ängste:\n1. Kosten\n- Kosten – laufen aus dem Ruder")
        assert _examples(groups[0].items[0]) == ["laufen aus dem Ruder"]

    def test_example_equal_to_title_is_dropped(self) -> None:
        groups = parse_outline("Typische Ängste:\n1. Kosten\n- kosten\n- Budget")
        assert _examples(groups[0].items[0]) == ["Budget"]

    def test_bullets_block_pair_repair(self) -> None:
        body = "\n".join(f"{n}. Titel {n} – Beispiel {n}" for n in range(1, 7))
        groups = parse_outline(f"Typische Ziele:\n{body}\n- Extra")
        assert _titles(groups[0]) == [f"Titel {n}" for n in range(1, 6)]

    def test_bullet_before_any_item_is_dropped(self) -> None:
        groups = parse_outline("Typische Ziele:\n- verloren\n1. Ziel")
        assert groups[0].items[0].examples == []


# ===========================================================================
# Shape 3: inline compressed format
# ===========================================================================


class TestInlineShape:
    def test_single_inline_example(self) -> None:
        groups = parse_outline("Typische Ziele:\n1. Zeit sparen – schneller Start")
        item = groups[0].items[0]
        assert item.title == "Zeit sparen"
        assert _examples(item) == ["schneller Start"]

    def test_second_segment_becomes_second_example(self) -> None:
        groups = parse_outline("Typische Ziele:\n1. Zeit sparen – schneller Start - weniger Stress")
        assert _examples(groups[0].items[0]) == ["schneller Start", "weniger Stress"]

    def test_hyphenated_words_do_not_split(self) -> None:
        groups = parse_outline("Typische Ängste:\n1. Know-how fehlt – Team-Aufbau dauert")
        item = groups[0].items[0]
        assert item.title == "Know-how fehlt"
        assert _examples(item) == ["Team-Aufbau dauert"]

    def test_scenario_b_repeated_title_merges(self) -> None:
        groups = parse_outline(
            "Typische Ängste\n1. Titel X – Beispiel 1\n2. Titel X – Beispiel 2"
        )
        assert len(groups) == 1
        assert len(groups[0].items) == 1
        item = groups[0].items[0]
        assert item.title == "Titel X"
        assert _examples(item) == ["Beispiel 1", "Beispiel 2"]

    def test_non_adjacent_repeats_stay_separate(self) -> None:
        groups = parse_outline("Typische Ängste:\n1. A – x\n2. B – y\n3. A – z")
        assert _titles(groups[0]) == ["A", "B", "A"]


# ===========================================================================
# Shape 4: degenerate flat numbered pairs
# ===========================================================================


def _pairs_text(count: int) -> str:
    lines = []
    for n in range(1, count + 1):
        title = f"Titel {(n + 1) // 2}"
        lines.append(f"{n}. {title} – Beispiel {n}")
    return "Typische Ängste:\n" + "\n".join(lines)


class TestDegeneratePairs:
    @pytest.mark.parametrize("count", [6, 7, 8, 10, 11, 14])
    def test_item_count(self, count: int) -> None:
        groups = parse_outline(_pairs_text(count))
        assert len(groups[0].items) == min(5, count // 2)

    def test_pairs_merge_title_and_examples(self) -> None:
        items = parse_outline(_pairs_text(8))[0].items
        assert [item.title for item in items] == ["Titel 1", "Titel 2", "Titel 3", "Titel 4"]
        assert _examples(items[0]) == ["Beispiel 1", "Beispiel 2"]
        assert _examples(items[3]) == ["Beispiel 7", "Beispiel 8"]

    def test_second_line_without_separator_is_example(self) -> None:
        text = "Typische Ziele:\n" + "\n".join(
            f"{n}. Ziel {n} – Beispiel {n}" if n % 2 else f"{n}. Freitext {n}"
            for n in range(1, 7)
        )
        items = parse_outline(text)[0].items
        assert items[0].title == "Ziel 1"
        assert _examples(items[0]) == ["Beispiel 1", "Freitext 2"]

    def test_numbering_discarded(self) -> None:
        text = "Typische Ziele:\n" + "\n".join(f"7. Ziel {n} – B{n}" for n in range(6))
        items = parse_outline(text)[0].items
        assert [item.title for item in items] == ["Ziel 0", "Ziel 2", "Ziel 4"]

    def test_empty_numbered_lines_are_not_paired(self) -> None:
        lines = ["1."]
        for n in range(1, 4):
            lines.append(f"{2 * n}. Titel {n}")
            lines.append(f"{2 * n + 1}. Titel {n} – Beispiel {n}")
        groups = parse_outline("Typische Ängste:\n" + "\n".join(lines))
        items = groups[0].items
        assert [item.title for item in items] == ["Titel 1", "Titel 2", "Titel 3"]
        assert [_examples(item) for item in items] == [["Beispiel 1"], ["Beispiel 2"], ["Beispiel 3"]]

    def test_empty_numbered_line_does_not_count_toward_repair(self) -> None:
        text = "Typische Ziele:\n1.\n2. B – b\n3. C – c\n4. C – d\n5. D – e\n6. D – f"
        groups = parse_outline(text)
        assert detect_shape(classify_lines(text)[1:]) is INLINE
        assert [item.title for item in groups[0].items] == ["B", "C", "D"]


# ===========================================================================
# Caps, detection and tolerance
# ===========================================================================


class TestLimitsAndDetection:
    def test_caps_items_and_examples(self) -> None:
        lines = ["Typische Ziele:"]
        for n in range(1, 8):
            lines.append(f"{n}. Ziel {n}")
            lines.extend(f"- Beispiel {n}.{k}" for k in range(1, 5))
        groups = parse_outline("\n".join(lines))
        assert len(groups[0].items) == 5
        assert all(len(item.examples) == 2 for item in groups[0].items)

    @pytest.mark.parametrize(
        "body, shape",
        [
            ("1. A\n2. B", FLAT),
            ("1. A – a\n2. B", INLINE),
            ("1. A\n- a", BULLETED),
            ("\n".join(f"{n}. T{n}" for n in range(1, 7)), DEGENERATE_PAIRS),
        ],
    )
    def test_detect_shape(self, body: str, shape) -> None:
        [(key, lines)] = split_groups(classify_lines(f"Typische Ziele:\n{body}"))
        assert key == "goals"
        assert detect_shape(lines) is shape

    @pytest.mark.parametrize(
        "text",
        [None, "", "\n\n", "::::", "1.", "- - -", "Typische Ziele:", "Typische Ziele:\n– –\n1) ", "Zeile ohne alles"],
    )
    def test_never_raises(self, text) -> None:
        assert isinstance(parse_outline(text), list)

    def test_merge_rule_caps_examples(self) -> None:
        first = Item("A")
        first.add_example("x")
        second = Item("a")
        second.add_example("y")
        second.add_example("z")
        merged = merge_repeated_titles([first, second])
        assert len(merged) == 1
        assert merged[0].example_texts() == ["x", "y"]


class TestCleaning:
    def test_split_dash_segments_requires_spaces(self) -> None:
        assert split_dash_segments("E-Mail-Flut") == ["E-Mail-Flut"]

    def test_strip_quotes_only_when_wrapping(self) -> None:
        assert strip_quotes('"Zitat" sagt er') == '"Zitat" sagt er'
        assert strip_quotes("»Zitat«") == "Zitat"
        assert strip_quotes('"Zu teuer" oder "zu langsam"') == '"Zu teuer" oder "zu langsam"'
        assert strip_quotes("„Preis“ und „Zeit“") == "„Preis“ und „Zeit“"

    def test_separate_quotes_survive_parsing(self) -> None:
        groups = parse_outline('Typische Ziele:\n1. Klarheit\n- "Zu teuer" oder "zu langsam"')
        assert _examples(groups[0].items[0]) == ['"Zu teuer" oder "zu langsam"']

    def test_clean_example_combines_rules(self) -> None:
        assert clean_example("  • „Kosten – zu hoch“ ", "Kosten") == "zu hoch"
