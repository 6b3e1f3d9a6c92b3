"""Tests for AST serialization."""

import json

import pytest

from resume_lang import AST, Node, parse, to_dict, to_json, to_source

RESUME = """section Basic
  label Name: "Siddharth Gelera"
  label Born: date 1998-07-14
  label Website: url https://reaper.is
  label Blog: url "My Blog" https://reaper.is/writing
  label Motto:" padded "
end
section Experience
  section Acme
    label Role:Engineer
    label Starts: date Jan 2020
text About:
Builds *tools*.

Likes the end of the week.
end
  end
end
label Footer:"url not a link"
"""


class TestToDict:
    def test_no_parent_key(self):
        ast = parse(RESUME)
        text = to_json(ast)
        assert '"parent"' not in text
        json.loads(text)

    def test_json_matches_dict(self):
        ast = parse(RESUME)
        assert json.loads(to_json(ast)) == to_dict(ast)

    def test_date_rendered_as_iso(self):
        ast = parse("label Born: date 1998-07-14")
        label = to_dict(ast)["children"][0]
        assert label["value"]["id"] == "Born"
        assert label["value"]["value"]["type"] == "date"
        assert label["value"]["value"]["value"] == "1998-07-14T00:00:00"

    def test_text_value_shape(self):
        ast = parse("label x:y")
        assert to_dict(ast) == {
            "type": "root",
            "children": [
                {
                    "type": "label",
                    "value": {"id": "x", "value": {"type": "text", "value": "y"}},
                    "children": [],
                }
            ],
        }


class TestToSource:
    def test_simple_nesting(self):
        ast = parse("section A\nlabel x:y\nend")
        assert to_source(ast) == "section A\n  label x:y\nend\n"

    def test_typed_literals(self):
        ast = parse('label Site: url "My Site" https://x.io\nlabel On: date 2020-02-02')
        assert to_source(ast) == (
            'label Site:url "My Site" https://x.io\n'
            "label On:date 2020-02-02\n"
        )

    def test_round_trip(self):
        ast = parse(RESUME)
        again = parse(to_source(ast))
        assert to_dict(again) == to_dict(ast)

    def test_date_ids_round_trip(self):
        ast = parse("label date 2020: joined\ntext date 2021:\nbody\nend\n")
        source = to_source(ast)
        assert "label date 2020-01-01:joined" in source
        assert "text date 2021-01-01:" in source

        again = parse(source)
        assert to_dict(again) == to_dict(ast)
        assert again.children[0].value.value.value == "joined"
        assert again.children[1].value.original == "body"

    def test_dates_with_time_render_without_colons(self):
        ast = parse(
            "label At: date 2020-02-02 10:30:15\n"
            "label Exact: date 2020-02-02 10:30:15.250000+01:00\n"
        )
        source = to_source(ast)
        assert "label At:date 2020-02-02 103015\n" in source
        assert "label Exact:date 2020-02-02 103015.250000+0100\n" in source
        assert to_dict(parse(source)) == to_dict(ast)

    def test_round_trip_is_stable(self):
        source = to_source(parse(RESUME))
        assert to_source(parse(source)) == source

    def test_text_that_looks_typed_is_quoted(self):
        ast = parse('label Footer:"url not a link"\nlabel Plain:"date"')
        source = to_source(ast)
        assert 'label Footer:"url not a link"' in source
        assert 'label Plain:"date"' in source

    def test_unknown_node_type(self):
        with pytest.raises(ValueError):
            to_source(AST(children=[Node(type="bogus")]))
