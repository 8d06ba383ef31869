# -*- coding: utf-8 -*-
import json

import pandas as pd
import pytest

from funcoes_utilitarias.classify_ways_frame import classify_ways_frame


def test_classifies_each_row(parser):
    ways_df = pd.DataFrame({
        "way_id": [10, 11, 12, 13],
        "tags": [
            json.dumps({"highway": "residential", "oneway": "yes"}),
            {"highway": "motorway"},
            json.dumps({"route": "ferry"}),
            json.dumps({"highway": "tertiary", "junction": "roundabout"}),
        ],
    })

    access_df = classify_ways_frame(ways_df, parser)

    assert list(access_df.columns) == ["way_id", "access", "forward", "backward"]
    assert access_df["access"].tolist() == ["routable", "skip", "ferry", "routable"]
    assert access_df["forward"].tolist() == [True, False, True, True]
    assert access_df["backward"].tolist() == [False, False, True, False]


def test_barrier_node_tags_column(parser):
    ways_df = pd.DataFrame({
        "way_id": [1, 2],
        "tags": [json.dumps({"highway": "path", "barrier_edge": "yes"})] * 2,
        "node_tags": [json.dumps([{"barrier": "fence"}]), ""],
    })

    access_df = classify_ways_frame(ways_df, parser)

    assert access_df["forward"].tolist() == [False, True]
    assert access_df["backward"].tolist() == [False, True]


def test_empty_tags_cell_is_an_empty_way(parser):
    access_df = classify_ways_frame(pd.DataFrame({"way_id": [1], "tags": [""]}), parser)
    assert access_df["access"].tolist() == ["skip"]


def test_missing_column(parser):
    with pytest.raises(ValueError, match="tags"):
        classify_ways_frame(pd.DataFrame({"way_id": [1]}), parser)


def test_invalid_json_reports_the_row(parser):
    ways_df = pd.DataFrame({"way_id": [1, 2], "tags": ['{"highway": "path"}', "{highway"]})
    with pytest.raises(ValueError, match="Linha 2"):
        classify_ways_frame(ways_df, parser)
