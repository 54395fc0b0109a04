"""The parse-error and parse-metadata languages and their meta-functions."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from langspec.core import (
    IdentifiedBy,
    Name,
    Transparency,
    TyMetaFuncData,
    TyMetaFuncSpec,
)
from langspec.flat import LangSpecFlat
from langspec.human import LangSpecHuman

_PARSE_ERROR_JSON = """
{
    "name": {
        "human": "ParseError",
        "camel": "ParseError",
        "snake": "parse_error"
    },
    "products": [],
    "sums": []
}
"""

_PARSE_METADATA_JSON = """
{
    "name": {
        "human": "ParseMetadata",
        "camel": "ParseMetadata",
        "snake": "parse_metadata"
    },
    "products": [],
    "sums": []
}
"""


@dataclass(frozen=True, order=True)
class ParseErrorTmfId:
    """The single meta-function of the parse-error language."""


@dataclass(frozen=True)
class ParseErrorTmfs(TyMetaFuncSpec):
    def ty_meta_func_data(self, tmf_id: Hashable) -> TyMetaFuncData:
        if not isinstance(tmf_id, ParseErrorTmfId):
            raise TypeError(f"not a parse-error meta-function id: {tmf_id!r}")
        return TyMetaFuncData(
            name=Name("ParseError", "ParseError", "parse_error"),
            args=(),
            imp="std_parse_error::ParseError",
            heapbak="std_parse_error::ParseErrorHeapBak",
            idby=IdentifiedBy.TMF,
            canonical_froms=(),
            size_depends_on=(),
            is_collection_of=(),
            transparency=Transparency.TRANSPARENT,
        )


def parse_error_langspec() -> LangSpecFlat:
    """The empty language that carries parse errors."""
    lsh = LangSpecHuman.from_json(_PARSE_ERROR_JSON)
    lsh.tmfs = ParseErrorTmfs()
    return LangSpecFlat.canonical_from(lsh)


@dataclass(frozen=True, order=True)
class ParseMetadataTmfId:
    """The single meta-function of the parse-metadata language."""


@dataclass(frozen=True)
class ParseMetadataTmfs(TyMetaFuncSpec):
    def ty_meta_func_data(self, tmf_id: Hashable) -> TyMetaFuncData:
        if not isinstance(tmf_id, ParseMetadataTmfId):
            raise TypeError(f"not a parse-metadata meta-function id: {tmf_id!r}")
        return TyMetaFuncData(
            name=Name("ParseMetadata", "ParseMetadata", "parse_metadata"),
            args=(),
            imp="std_parse_metadata::ParseMetadata",
            heapbak="std_parse_metadata::ParseMetadataHeapBak",
            idby=IdentifiedBy.TMF,
            canonical_froms=(),
            size_depends_on=(),
            is_collection_of=(),
            transparency=Transparency.VISIBLE,
        )


def parse_metadata_langspec() -> LangSpecFlat:
    """The empty language that carries parse metadata."""
    lsh = LangSpecHuman.from_json(_PARSE_METADATA_JSON)
    lsh.tmfs = ParseMetadataTmfs()
    return LangSpecFlat.canonical_from(lsh)