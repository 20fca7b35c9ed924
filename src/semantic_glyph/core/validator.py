"""DotId consistency rules.

Each rule is independent and returns diagnostics; ``validate`` composes them.
Nothing here raises for document content.
"""

from collections.abc import Mapping, Sequence

from semantic_glyph.core.text import LineIndex
from semantic_glyph.models import (
    Declaration,
    Diagnostic,
    DiagnosticCode,
    Reference,
    Severity,
    ValidationFix,
    ValidationResult,
)

MAX_GLYPHS_PER_STATEMENT = 3


def _first_declarations(declarations: Sequence[Declaration]) -> dict[int, Declaration]:
    first: dict[int, Declaration] = {}
    for decl in declarations:
        first.setdefault(decl.dotid.value, decl)
    return first


def find_duplicate_declarations(declarations: Sequence[Declaration]) -> tuple[list[Declaration], list[Diagnostic]]:
    duplicates: list[Declaration] = []
    errors: list[Diagnostic] = []
    seen: dict[int, Declaration] = {}
    for decl in declarations:
        existing = seen.get(decl.dotid.value)
        if existing is None:
            seen[decl.dotid.value] = decl
            continue
        duplicates.append(decl)
        errors.append(
            Diagnostic(
                code=DiagnosticCode.DUPLICATE_DECLARATION,
                severity=Severity.ERROR,
                message=(
                    f"Duplicate declaration: DotId {decl.dotid.value} ({decl.dotid.signature}) was already "
                    f'declared as "{existing.term}" at line {existing.position.line + 1}'
                ),
                position=decl.position,
            )
        )
    return duplicates, errors


def find_orphaned_references(
    declarations: Sequence[Declaration], references: Sequence[Reference]
) -> tuple[list[Reference], list[Diagnostic]]:
    declared = {d.dotid.value for d in declarations}
    orphans: list[Reference] = []
    errors: list[Diagnostic] = []
    for ref in references:
        if ref.dotid.value in declared:
            continue
        orphans.append(ref)
        errors.append(
            Diagnostic(
                code=DiagnosticCode.ORPHANED_REFERENCE,
                severity=Severity.ERROR,
                message=(
                    f"Orphaned reference: DotId {ref.dotid.value} ({ref.dotid.signature}) is used but never declared"
                ),
                position=ref.position,
            )
        )
    return orphans, errors


def find_unused_declarations(declarations: Sequence[Declaration], references: Sequence[Reference]) -> list[Diagnostic]:
    referenced = {r.dotid.value for r in references}
    return [
        Diagnostic(
            code=DiagnosticCode.UNUSED_DECLARATION,
            severity=Severity.WARNING,
            message=f'Unused declaration: "{decl.term}" ({decl.dotid.signature}) is declared but never referenced',
            position=decl.position,
        )
        for value, decl in _first_declarations(declarations).items()
        if value not in referenced
    ]


def check_reference_order(declarations: Sequence[Declaration], references: Sequence[Reference]) -> list[Diagnostic]:
    """Flag references that appear before their declaration. Allowed, but worth knowing."""
    declared_at = {value: d.position.offset for value, d in _first_declarations(declarations).items()}
    notices: list[Diagnostic] = []
    for ref in references:
        offset = declared_at.get(ref.dotid.value)
        if offset is not None and ref.position.offset < offset:
            notices.append(
                Diagnostic(
                    code=DiagnosticCode.REFERENCE_BEFORE_DECLARATION,
                    severity=Severity.INFO,
                    message=f"Reference to {{{ref.dotid.signature}}} appears before its declaration",
                    position=ref.position,
                )
            )
    return notices


def validate_glyph_limit(glyphs_per_line: Mapping[int, int], line_index: LineIndex) -> list[Diagnostic]:
    """Warn for each line carrying more than three glyphs. DotIds do not count."""
    return [
        Diagnostic(
            code=DiagnosticCode.GLYPH_LIMIT_EXCEEDED,
            severity=Severity.WARNING,
            message=f"Line {line + 1} has {count} glyphs (max {MAX_GLYPHS_PER_STATEMENT} per statement)",
            position=line_index.line_position(line),
        )
        for line, count in sorted(glyphs_per_line.items())
        if count > MAX_GLYPHS_PER_STATEMENT
    ]


def validate(declarations: Sequence[Declaration], references: Sequence[Reference]) -> ValidationResult:
    duplicates, duplicate_errors = find_duplicate_declarations(declarations)
    orphans, orphan_errors = find_orphaned_references(declarations, references)
    errors = [*duplicate_errors, *orphan_errors]
    return ValidationResult(
        is_valid=not errors,
        orphaned_references=orphans,
        duplicate_declarations=duplicates,
        errors=errors,
        warnings=find_unused_declarations(declarations, references),
        notices=check_reference_order(declarations, references),
    )


def suggest_fixes(result: ValidationResult) -> list[ValidationFix]:
    fixes = [
        ValidationFix(
            type="add_declaration",
            description=(
                f"Add a declaration for DotId {orphan.dotid.value} ({orphan.dotid.signature}) before this reference"
            ),
            position=orphan.position,
        )
        for orphan in result.orphaned_references
    ]
    fixes.extend(
        ValidationFix(
            type="remove_duplicate",
            description=f'Remove duplicate declaration of "{dup.term}" or use a different DotId',
            position=dup.position,
        )
        for dup in result.duplicate_declarations
    )
    return fixes
