"""Unit tests for the free-text section parsers."""

import pytest

from resumetex.contexts.intake.extraction_patterns import (
    EDUCATION_DATE_PATTERNS,
    EXPERIENCE_DATE_PATTERNS,
    PROJECT_DATE_PATTERNS,
    DatePatterns,
)
from resumetex.contexts.intake.resume_fields import (
    EducationEntry,
    JobEntry,
    ProjectEntry,
    SkillGroup,
)
from resumetex.contexts.intake.section_parser import (
    DEFAULT_SKILL_CATEGORY,
    extract_header_date,
    parse_education,
    parse_experience,
    parse_projects,
    parse_skills,
    split_blocks,
    split_title_company,
    strip_bullet,
)

ALL_PARSERS = [parse_experience, parse_education, parse_projects, parse_skills]


# =============================================================================
# SHARED HELPERS
# =============================================================================


@pytest.mark.unit
def test_split_blocks_on_blank_lines():
    text = "A\n• x\n\n\nB\n  \nC\r\n\r\nD"
    assert split_blocks(text) == [["A", "• x"], ["B"], ["C"], ["D"]]


@pytest.mark.unit
@pytest.mark.parametrize("text", [None, "", "   \n\n  "])
def test_split_blocks_empty(text):
    assert split_blocks(text) == []


@pytest.mark.unit
def test_date_candidates_are_ordered():
    """Parenthesized ranges take precedence for experience and education."""
    assert EXPERIENCE_DATE_PATTERNS[0] is DatePatterns.PAREN_RANGE
    assert EDUCATION_DATE_PATTERNS[0] is DatePatterns.PAREN_RANGE
    assert PROJECT_DATE_PATTERNS == [DatePatterns.SEPARATED_MONTH_YEAR_SINGLE]


@pytest.mark.unit
def test_extract_header_date_first_candidate_wins():
    header = "Engineer — Acme | Jan 2020 – Mar 2021 (Contract)"
    dates, rest = extract_header_date(header, EXPERIENCE_DATE_PATTERNS)

    assert dates == "Contract"
    assert rest == "Engineer — Acme | Jan 2020 – Mar 2021"


@pytest.mark.unit
def test_extract_header_date_no_match():
    assert extract_header_date("  Freelance  ", EXPERIENCE_DATE_PATTERNS) == ("", "Freelance")


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("Software Engineer — Acme Corp", ("Software Engineer", "Acme Corp")),
        ("Data Engineer at Globex", ("Data Engineer", "Globex")),
        ("Analyst - Initech", ("Analyst", "Initech")),
        ("Co-Founder - Start-Up Inc", ("Co-Founder", "Start-Up Inc")),
        ("Engineer at Acme at Night", ("Engineer", "Acme at Night")),
        ("Freelance", ("Freelance", "")),
        ("Data Analyst", ("Data Analyst", "")),
    ],
)
def test_split_title_company(text, expected):
    assert split_title_company(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [("• Led migration", "Led migration"), ("-  Built", "Built"), ("*x", "x"), ("plain", "plain")],
)
def test_strip_bullet(line, expected):
    assert strip_bullet(line) == expected


# =============================================================================
# EXPERIENCE
# =============================================================================


@pytest.mark.unit
def test_parse_experience_scenario():
    text = "Software Engineer — Acme Corp (Jan 2023 – Present)\n• Led migration\n• Mentored 3 devs"

    assert parse_experience(text) == [
        JobEntry(
            title="Software Engineer",
            company="Acme Corp",
            dates="Jan 2023 – Present",
            bullets=("Led migration", "Mentored 3 devs"),
        )
    ]


@pytest.mark.unit
def test_parse_experience_separated_month_year():
    text = "Data Engineer at Globex | Mar 2021 – Dec 2022\n- Built ETL\n* Cut costs"
    job = parse_experience(text)[0]

    assert job.title == "Data Engineer"
    assert job.company == "Globex"
    assert job.dates == "Mar 2021 – Dec 2022"
    assert job.bullets == ("Built ETL", "Cut costs")


@pytest.mark.unit
def test_parse_experience_multiple_blocks_keep_order():
    text = "A — X (2020)\n• a\n\nB — Y (2021)\n• b\n\nC — Z (2022)"
    jobs = parse_experience(text)

    assert [job.title for job in jobs] == ["A", "B", "C"]
    assert jobs[2].bullets == ()


@pytest.mark.unit
def test_parse_experience_ignores_non_bullet_lines():
    text = "Engineer — Acme (2020 – 2021)\nSome prose line\n• Real bullet"
    assert parse_experience(text)[0].bullets == ("Real bullet",)


@pytest.mark.unit
def test_parse_experience_without_structure_falls_back_to_header():
    job = parse_experience("Freelance consulting for small businesses")[0]

    assert job.title == "Freelance consulting for small businesses"
    assert job.company == ""
    assert job.dates == ""


@pytest.mark.unit
def test_parse_experience_title_never_empty():
    """A header that is only a date still yields a non-empty title."""
    job = parse_experience("(2020 – 2021)")[0]
    assert job.title == "(2020 – 2021)"
    assert job.dates == "2020 – 2021"


# =============================================================================
# EDUCATION
# =============================================================================


@pytest.mark.unit
def test_parse_education_parenthesized():
    text = "B.Sc. Computer Science — State University (2016 – 2020)\nGPA 3.8\n• Dean's List"

    assert parse_education(text) == [
        EducationEntry(
            degree="B.Sc. Computer Science",
            institution="State University",
            dates="2016 – 2020",
            extra="GPA 3.8 • Dean's List",
        )
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    "header, dates",
    [
        ("BS Physics at Tech Institute 2016-2020", "2016-2020"),
        ("MSc Math — Uni 2021 – present", "2021 – present"),
        ("PhD — Uni 2022-Ongoing", "2022-Ongoing"),
    ],
)
def test_parse_education_bare_year_range(header, dates):
    entry = parse_education(header)[0]
    assert entry.dates == dates
    assert entry.institution
    assert dates not in entry.institution


@pytest.mark.unit
def test_parse_education_without_structure():
    entry = parse_education("Self-taught")[0]
    assert entry == EducationEntry(degree="Self-taught")


# =============================================================================
# PROJECTS
# =============================================================================


@pytest.mark.unit
def test_parse_projects_full_block():
    text = (
        "Portfolio Site | React | Mar 2024\n"
        "• Personal site\n"
        "with a blog\n"
        "Tech: React, Next.js\n"
        "Live: https://janedoe.dev\n"
        "GitHub: https://github.com/janedoe/site"
    )

    assert parse_projects(text) == [
        ProjectEntry(
            name="Portfolio Site",
            date="Mar 2024",
            tech="React, Next.js",
            description="Personal site with a blog",
            live_url="https://janedoe.dev",
            github_url="https://github.com/janedoe/site",
        )
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, field, value",
    [
        ("tech stack: Go", "tech", "Go"),
        ("Technologies: Rust", "tech", "Rust"),
        ("TECH Python", "tech", "Python"),
        ("Live Demo: https://x.app", "live_url", "https://x.app"),
        ("github https://github.com/a/b", "github_url", "https://github.com/a/b"),
    ],
)
def test_parse_projects_label_variants(line, field, value):
    project = parse_projects(f"Thing\n{line}")[0]
    assert getattr(project, field) == value
    assert project.description == ""


@pytest.mark.unit
def test_parse_projects_label_needs_separator():
    project = parse_projects("Thing\nTechnical deep-dive into caching")[0]
    assert project.tech == ""
    assert project.description == "Technical deep-dive into caching"


@pytest.mark.unit
def test_parse_projects_en_dash_date_and_no_date():
    projects = parse_projects("CLI Tool – Jan 2023\n\nTask Queue\nA tiny job runner")

    assert projects[0].name == "CLI Tool"
    assert projects[0].date == "Jan 2023"
    assert projects[1].name == "Task Queue"
    assert projects[1].date == ""
    assert projects[1].description == "A tiny job runner"
    assert projects[1].live_url is None


# =============================================================================
# SKILLS
# =============================================================================


@pytest.mark.unit
def test_parse_skills_scenario():
    assert parse_skills("Languages: JavaScript, TypeScript, Python") == [
        SkillGroup(category="Languages", skills="JavaScript, TypeScript, Python")
    ]


@pytest.mark.unit
def test_parse_skills_splits_on_first_colon_only():
    group = parse_skills("Web: HTTP: REST, gRPC")[0]
    assert group == SkillGroup(category="Web", skills="HTTP: REST, gRPC")


@pytest.mark.unit
def test_parse_skills_line_without_colon_uses_default_category():
    groups = parse_skills("Python, SQL\n\nTools: Git")

    assert groups == [
        SkillGroup(category=DEFAULT_SKILL_CATEGORY, skills="Python, SQL"),
        SkillGroup(category="Tools", skills="Git"),
    ]


# =============================================================================
# SHARED CONTRACT
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("parser", ALL_PARSERS)
@pytest.mark.parametrize("text", [None, "", "  \n \n"])
def test_parsers_return_empty_for_empty_input(parser, text):
    assert parser(text) == []


@pytest.mark.unit
@pytest.mark.parametrize("parser", ALL_PARSERS)
@pytest.mark.parametrize(
    "text",
    ["just some words", "((((", "— at -", "|||| Jan 2020", "•", ":::"],
)
def test_parsers_never_raise_and_return_records(parser, text):
    assert len(parser(text)) >= 1
