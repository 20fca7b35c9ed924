from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GlyphCategory(str, Enum):
    LEVEL = "level"
    MAGNITUDE = "magnitude"
    EPISTEMIC = "epistemic"
    STRUCTURAL = "structural"
    CAUSAL = "causal"
    CENTRALITY = "centrality"
    PROVENANCE = "provenance"
    BOUNDARY = "boundary"
    SALIENCE = "salience"
    FRAMING = "framing"
    AGENCY = "agency"


class CompoundCategory(str, Enum):
    AGENCY = "agency"
    EPISTEMIC = "epistemic"
    STRUCTURAL = "structural"


class AttachmentKind(str, Enum):
    TERM = "term"
    GLYPH = "glyph"
    REFERENCE = "reference"


class TokenType(str, Enum):
    GLYPH = "glyph"
    COMPOUND = "compound"
    MICRO_GLYPH = "micro_glyph"
    DOTID_DECLARATION = "dotid_declaration"
    DOTID_REFERENCE = "dotid_reference"
    TEXT = "text"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticCode(str, Enum):
    DUPLICATE_DECLARATION = "duplicate_declaration"
    ORPHANED_REFERENCE = "orphaned_reference"
    UNUSED_DECLARATION = "unused_declaration"
    REFERENCE_BEFORE_DECLARATION = "reference_before_declaration"
    GLYPH_LIMIT_EXCEEDED = "glyph_limit_exceeded"


class SuggestionContext(str, Enum):
    SENTENCE_START = "sentence_start"
    AFTER_CAUSAL = "after_causal"
    AFTER_COMPARISON = "after_comparison"
    AFTER_HEDGE = "after_hedge"
    QUESTION = "question"
    CITATION = "citation"
    EXAMPLE = "example"
    WARNING = "warning"
    DEFINITION = "definition"
    UNKNOWN = "unknown"


class SuggestionSource(str, Enum):
    PRONOUN_AMBIGUITY = "pronoun_ambiguity"
    REPETITION = "repetition"


# --- Registry records ---


class Glyph(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    category: GlyphCategory
    description: str
    pair: str | None = None
    color: str
    is_base: bool


class GlyphCompound(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbols: str
    components: tuple[str, ...]
    meaning: str
    compound_category: CompoundCategory


class MicroGlyph(BaseModel):
    model_config = ConfigDict(frozen=True)

    letter: str
    bias: str
    description: str


class CategoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: GlyphCategory
    name: str
    description: str
    question: str
    color: str
    base_glyph: str
    alt_glyph: str


# --- DotIds ---


class ClusterLayout(BaseModel):
    """Two-over-one rendering hint for clustered signatures."""

    model_config = ConfigDict(frozen=True)

    top: tuple[str, str]
    bottom: str


class DotId(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=1, le=10)
    signature: str
    primitives: tuple[str, ...]
    is_cluster: bool = False
    cluster: ClusterLayout | None = None


# --- Parse results ---


class SourcePosition(BaseModel):
    """Zero-based line/column plus absolute character offset and span length."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


class AnnotationMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str
    kind: AttachmentKind
    term: str | None = None
    glyph: str | None = None
    dotid: DotId
    position: SourcePosition
    incomplete: bool = False

    @property
    def label(self) -> str:
        return self.term or self.glyph or "(glyph)"


class Declaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    dotid: DotId
    position: SourcePosition
    kind: AttachmentKind = AttachmentKind.TERM
    is_declaration: bool = True


class Reference(BaseModel):
    model_config = ConfigDict(frozen=True)

    dotid: DotId
    position: SourcePosition
    declaration: Declaration | None = None


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TokenType
    raw: str
    position: SourcePosition
    value: Glyph | GlyphCompound | MicroGlyph | Declaration | Reference | None = None


class GlyphUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    glyph: Glyph | GlyphCompound
    position: SourcePosition


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: DiagnosticCode
    severity: Severity
    message: str
    position: SourcePosition


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    orphaned_references: list[Reference] = Field(default_factory=list)
    duplicate_declarations: list[Declaration] = Field(default_factory=list)
    errors: list[Diagnostic] = Field(default_factory=list)
    warnings: list[Diagnostic] = Field(default_factory=list)
    notices: list[Diagnostic] = Field(default_factory=list)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [*self.errors, *self.warnings, *self.notices]


class ValidationFix(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["add_declaration", "remove_duplicate"]
    description: str
    position: SourcePosition
    replacement: str | None = None


class ParseResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    tokens: list[Token]
    matches: list[AnnotationMatch]
    declarations: list[Declaration]
    references: list[Reference]
    glyphs: list[GlyphUsage]
    validation: ValidationResult
    diagnostics: list[Diagnostic]

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid


class CounterSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    used: tuple[int, ...]
    declarations: tuple[Declaration, ...]


# --- Suggestions ---


class GlyphSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    glyph: Glyph
    confidence: float = Field(ge=0.0, le=1.0)
    reason: str
    context: SuggestionContext


class DotIdSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["add_declaration", "add_reference"] = "add_declaration"
    term: str
    dotid: DotId
    reason: str
    confidence: float = Field(ge=0.0, le=1.0)
    source: SuggestionSource


class SuggestionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    glyphs: list[GlyphSuggestion]
    dotids: list[DotIdSuggestion]
    at_sentence_start: bool


# --- Note-level views ---


class NoteObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    dotid: DotId
    declaration_position: SourcePosition
    references: list[SourcePosition] = Field(default_factory=list)
    associated_glyphs: list[GlyphUsage] = Field(default_factory=list)


class NoteAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    objects: list[NoteObject]
    orphaned_references: list[Reference]
    duplicate_declarations: list[Declaration]
    glyph_usage: dict[str, int]


class DensityReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    used: int
    should_split: bool
    reason: str | None = None


class NoteReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    diagnostics: list[Diagnostic]
    declarations: int
    references: int
    density: DensityReport

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity is Severity.WARNING)
