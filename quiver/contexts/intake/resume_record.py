"""
Resume Record Structure

Defines the structured source-of-truth record used both to generate a resume PDF
and to verify it. Records are immutable: one snapshot is loaded per run.

Two on-disk layouts are accepted (YAML or JSON, read through OmegaConf):

Native layout:
    basics: {name, email, phone, website, label, summary}
    sections:
      - title: Work Experience
        entries:
          - heading: Senior Engineer
            subheading: Acme Corp
            dates: 2019 - Present
            bullets: [...]

JSON Resume layout:
    basics: {name, email, phone, website | url, label, summary}
    work / education / skills / projects: lists in JSON Resume shape
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from omegaconf import OmegaConf

from quiver.contexts.intake.exceptions import ResumeRecordError

# JSON Resume top-level key -> section title, in rendering order
JSON_RESUME_SECTIONS = {
    "work": "Work Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
}

# Date formats found in JSON Resume startDate/endDate fields
ISO_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m"]


@dataclass(frozen=True)
class ResumeEntry:
    """
    A single item within a section (a job, a degree, a skill group, a project).

    All fields are optional; the generator skips empty ones.
    """

    heading: str = ""
    subheading: str = ""
    dates: str = ""
    bullets: Tuple[str, ...] = ()
    text: str = ""


@dataclass(frozen=True)
class ResumeSection:
    """An ordered section of the resume, e.g. "Work Experience"."""

    title: str
    entries: Tuple[ResumeEntry, ...] = ()


@dataclass(frozen=True)
class ResumeRecord:
    """
    Structured resume content.

    Attributes:
        name: Candidate name, rendered first and used for the reading-order check
        email: Contact email, matched verbatim
        phone: Contact phone, may contain separators such as "(555) 123-4567"
        website: Personal URL, scheme optional
        sections: Ordered sections
        label: Optional headline under the name (e.g. "Software Engineer")
        summary: Optional profile paragraph
    """

    name: str
    email: str = ""
    phone: str = ""
    website: str = ""
    sections: Tuple[ResumeSection, ...] = ()
    label: str = ""
    summary: str = ""
    source_path: Optional[Path] = field(default=None, compare=False)

    @property
    def section_titles(self) -> List[str]:
        return [section.title for section in self.sections]


def _text(value: Any) -> str:
    """Coerce a scalar field to a stripped string ("" for missing values)."""
    if value is None:
        return ""
    return str(value).strip()


def _text_list(values: Any) -> Tuple[str, ...]:
    """Coerce a list field to stripped strings, dropping blank items."""
    return tuple(t for t in (_text(v) for v in values or []) if t)


def _format_iso_date(value: Any) -> str:
    """
    Render a JSON Resume date for display.

    Example:
        >>> _format_iso_date("2014-06-29")
        'Jun 2014'
        >>> _format_iso_date("2016")
        '2016'
    """
    raw = _text(value)
    for fmt in ISO_DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).strftime("%b %Y")
        except ValueError:
            continue
    return raw


def _date_range(start: Any, end: Any) -> str:
    """Format a start/end pair as "start - end", with a missing end meaning Present."""
    start_text = _format_iso_date(start)
    if not start_text:
        return _format_iso_date(end)
    end_text = _format_iso_date(end) or "Present"
    return f"{start_text} - {end_text}"


def _parse_entry(raw: Any) -> ResumeEntry:
    """Parse one native-layout entry (mapping or bare string)."""
    if not isinstance(raw, dict):
        return ResumeEntry(text=_text(raw))

    return ResumeEntry(
        heading=_text(raw.get("heading")),
        subheading=_text(raw.get("subheading")),
        dates=_text(raw.get("dates")),
        bullets=_text_list(raw.get("bullets")),
        text=_text(raw.get("text")),
    )


def _parse_native_sections(raw_sections: Any, source: Path) -> Tuple[ResumeSection, ...]:
    if not isinstance(raw_sections, list):
        raise ResumeRecordError("'sections' must be a list", path=source)

    sections = []
    for i, raw in enumerate(raw_sections):
        if not isinstance(raw, dict) or not _text(raw.get("title")):
            raise ResumeRecordError(f"Section {i} is missing a 'title'", path=source)
        entries = tuple(_parse_entry(e) for e in raw.get("entries") or [])
        sections.append(ResumeSection(title=_text(raw["title"]), entries=entries))
    return tuple(sections)


def _json_resume_entry(key: str, item: Dict[str, Any]) -> ResumeEntry:
    """Map one JSON Resume list item onto a ResumeEntry."""
    if key == "work":
        return ResumeEntry(
            heading=_text(item.get("position")),
            subheading=_text(item.get("name") or item.get("company")),
            dates=_date_range(item.get("startDate"), item.get("endDate")),
            bullets=_text_list(item.get("highlights")),
            text=_text(item.get("summary")),
        )
    if key == "education":
        degree = " ".join(p for p in [_text(item.get("studyType")), _text(item.get("area"))] if p)
        return ResumeEntry(
            heading=degree,
            subheading=_text(item.get("institution")),
            dates=_date_range(item.get("startDate"), item.get("endDate")),
            bullets=_text_list(item.get("courses")),
        )
    if key == "skills":
        return ResumeEntry(
            heading=_text(item.get("name")),
            text=", ".join(_text_list(item.get("keywords"))),
        )
    # projects
    return ResumeEntry(
        heading=_text(item.get("name")),
        dates=_date_range(item.get("startDate"), item.get("endDate")),
        bullets=_text_list(item.get("highlights")),
        text=_text(item.get("description")),
    )


def _parse_json_resume_sections(data: Dict[str, Any]) -> Tuple[ResumeSection, ...]:
    sections = []
    for key, title in JSON_RESUME_SECTIONS.items():
        items = data.get(key) or []
        if not items:
            continue
        entries = tuple(_json_resume_entry(key, item) for item in items if isinstance(item, dict))
        sections.append(ResumeSection(title=title, entries=entries))
    return tuple(sections)


def resume_record_from_dict(data: Dict[str, Any], source: Optional[Path] = None) -> ResumeRecord:
    """
    Build a ResumeRecord from an already-loaded mapping.

    Raises:
        ResumeRecordError: If 'basics' is missing or sections are malformed
    """
    basics = data.get("basics")
    if not isinstance(basics, dict):
        raise ResumeRecordError("Resume record has no 'basics' block", path=source)

    if "sections" in data:
        sections = _parse_native_sections(data["sections"], source)
    else:
        sections = _parse_json_resume_sections(data)

    return ResumeRecord(
        name=_text(basics.get("name")),
        email=_text(basics.get("email")),
        phone=_text(basics.get("phone")),
        website=_text(basics.get("website") or basics.get("url")),
        sections=sections,
        label=_text(basics.get("label")),
        summary=_text(basics.get("summary")),
        source_path=source,
    )


def load_resume_record(path: Union[str, Path]) -> ResumeRecord:
    """
    Load a resume record from a YAML or JSON file.

    Args:
        path: Path to the record file

    Returns:
        ResumeRecord snapshot

    Raises:
        ResumeRecordError: If the file is missing, unparsable, or structurally invalid
    """
    path = Path(path)
    if not path.exists():
        raise ResumeRecordError("Resume record not found", path=path)

    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    except Exception as e:
        raise ResumeRecordError("Could not parse resume record", path=path, original_error=e) from e

    if not isinstance(data, dict):
        raise ResumeRecordError("Resume record must be a mapping", path=path)

    return resume_record_from_dict(data, source=path)
