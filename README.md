# langspec

A small library for describing languages as algebraic data: named
products and sums whose fields are sorts. A sort is a product
(`ProductSortId`), a sum (`SumSortId`), or a type meta-function applied
to other sorts (`MappedType`). Around that core the package has a
word-level cursor and LL parser, wrappers for parsed values and parse
errors, and patterns over terms.

## Modules

- `langspec.core`: `Name` (human, CamelCase and snake_case spellings,
  joined with `Name.merge`), the sort ids, `fmap_sort`, `project`,
  `sort_key`, `sort_id_to_data` / `sort_id_from_data`, the abstract
  `LangSpec` class with `all_sort_ids()`, the function
  `iter_tmf_monomorphizations(l)`, and `TyMetaFuncSpec` /
  `TyMetaFuncData` with the `Transparency` and `IdentifiedBy` enums.
- `langspec.flat`: `LangSpecFlat`, whose products and sums are addressed
  by position. `LangSpecFlat.canonical_from(l)` copies any language,
  ordering products and sums by human name; `to_yaml()` dumps it as YAML.
- `langspec.human`: `LangSpecHuman`, addressed by human names, built with
  `LangSpecHuman.from_data(...)` or `LangSpecHuman.from_json(...)`. It
  does not take part in sublanguages: its `sublang` raises `TypeError`.
- `langspec.sublang`: `Sublang`, `TmfEndoMapping`, `reflexive_sublang(l)`
  and the helpers `images`, `names` and `kebab`.
- `langspec.transparent`: `LsSortMapped`, which renames a language and
  rewrites its field sorts through a `ContextualSortMap`; meta-function
  ids are tagged `Left` or `Right`, and `embed_sort_id` lifts a sort id.
- `langspec.std_langs`: `parse_error_langspec()` and
  `parse_metadata_langspec()`, with `ParseErrorTmfs` and
  `ParseMetadataTmfs`.
- `langspec.parsing`: `Keyword`, `SourceSpan`, `ParseMetadata`,
  `TokenKind` and the `ParseError` exceptions (`UnexpectedTokenError`,
  `UnexpectedEndOfInput`, `TmfsParseFailure`, `RecursionLimitExceeded`).
- `langspec.cstfy`: `Cstfied` and `CstError`, made with `cstfy_ok` and
  `cstfy_err`, read with `uncstfy`.
- `langspec.cursor`: `ParseCursor` (`peek_words`, `pop_word`,
  `match_keywords`), `ParseLL` keyword sets, and `Parser` with `push`,
  `proceed`, `pop`, `select_case`, `admit_no_matching_case`,
  `parse_bounded_nat` and `parse_set`; lookaheads `keyword_lookahead`,
  `bounded_nat_lookahead` and `set_lookahead`. A missing keyword raises
  `KeywordMismatch`.
- `langspec.pattern_dyn`: pattern data (`CompositePattern`,
  `VariablePattern`, `ZeroOrMorePattern`, `IgnoredPattern`,
  `LiteralPattern`, `NamedDynPattern`) and `PatternBuilder`, whose
  `result()` raises `EmptyPatternError` or `AmbiguousPatternError`
  unless exactly one pattern is on its stack.
- `langspec.pattern_specialized`: `Literal`, `Variable`, `Ignored` and
  `Composite` patterns with `try_match`, returning `None` on failure and
  `BoundVariable` values for what they bind.
- `langspec.pattern_tmf`: `PatternTmfs` and the values `Ctor`, `Var`,
  `Ignore`, `ZeroOrMoreVar` and `NamedPattern`.
- `langspec.pattern_parse`, `langspec.pattern_unparse`,
  `langspec.pattern_visit`: read, write and feed into a
  `PatternBuilder` the pattern syntax `$ x` (variable), `_` (wildcard),
  `... xs` (zero or more) and `@ name = pattern` (named pattern).
  `Unparse.text()` joins the written pieces with single spaces.

## Example

```python
from langspec.core import Name
from langspec.flat import LangSpecFlat

name = Name(human="Demo", camel="Demo", snake="demo")
spec = LangSpecFlat.empty(name)
print(list(spec.all_sort_ids()))   # []
print(spec.to_yaml())
```

Reading words with a cursor:

```python
from langspec.cursor import ParseCursor

cursor = ParseCursor("{ 1 , 2 }")
print(cursor.pop_word())   # "{"
```

## What it does not do

The package describes languages and gives the pieces to parse and match
them; it does not generate code from a language spec, and it has no
command-line tool. Parsers for a particular language are put together
by calling `Parser` and the `parse_*` functions yourself.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```