"""Structured Solr query construction for identifier lookups.

A lookup matches a document when any one of several identifier fields holds the
requested value as an exact phrase. Each clause is rendered and URL-escaped on
its own, then the clauses are joined with a boolean OR.
"""

from dataclasses import dataclass, field
from urllib.parse import quote_plus, urlencode

IDENTIFIER_FIELDS = ("id", "alternate_id_facet", "barcode_facet")

RESULT_FIELDS = (
    "id",
    "shadowed_location_facet",
    "marc_display",
    "alternate_id_facet",
    "barcode_facet",
    "feature_facet",
)


def escape_phrase(value: str) -> str:
    """Escape a value for use inside a double-quoted Solr phrase."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


@dataclass(frozen=True)
class QueryClause:
    """A single exact-phrase `field:"value"` match."""

    field: str
    value: str

    def render(self) -> str:
        return f'{self.field}:"{escape_phrase(self.value)}"'

    def encoded(self) -> str:
        return quote_plus(self.render())


@dataclass(frozen=True)
class IdentifierQuery:
    """Boolean OR of exact-phrase clauses over the identifier fields."""

    identifier: str
    fields: tuple[str, ...] = IDENTIFIER_FIELDS
    result_fields: tuple[str, ...] = RESULT_FIELDS
    clauses: tuple[QueryClause, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "clauses", tuple(QueryClause(f, self.identifier) for f in self.fields)
        )

    @property
    def q(self) -> str:
        """Unencoded query, e.g. `id:"x" OR barcode_facet:"x"`."""
        return " OR ".join(clause.render() for clause in self.clauses)

    def encoded_q(self) -> str:
        """The query with every clause escaped independently, joined by `+OR+`."""
        return "+OR+".join(clause.encoded() for clause in self.clauses)

    def params(self) -> dict[str, str]:
        """Decoded request parameters; `query_string()` is their wire form."""
        return {
            "q": self.q,
            "fl": ",".join(self.result_fields),
            "wt": "json",
        }

    def query_string(self) -> str:
        """Full encoded query string sent to the select handler."""
        rest = {k: v for k, v in self.params().items() if k != "q"}
        return f"q={self.encoded_q()}&{urlencode(rest)}"


def document_query_string(doc_id: str) -> str:
    """Query string selecting a single document by its primary id."""
    return f"q={QueryClause('id', doc_id).encoded()}&wt=json"
