from services.section_parser import (
    COMPANY_INFO_MAX,
    MAX_ITEMS,
    OVERVIEW_MAX,
    extract_contact_info,
    extract_list_items,
    extract_section,
    identify_content_sections,
)

BULLETED_RESPONSIBILITIES = (
    "Responsibilities: - Prepare monthly financial reports "
    "- Reconcile supplier accounts weekly "
    "- Assist with annual audit preparation"
)


# --- Contact extraction ---

def test_extract_contact_phone():
    text = "Great opportunity in Durban. For more information contact Jane on 031 555 1234 today."
    contact, remaining = extract_contact_info(text)
    assert contact == "contact Jane on 031 555 1234"
    assert remaining == "Great opportunity in Durban. For more information  today."


def test_extract_contact_email():
    text = "Send your CV via email to careers@acme.co.za before Friday."
    contact, remaining = extract_contact_info(text)
    assert contact == "email to careers@acme.co.za"
    assert "careers@acme.co.za" not in remaining


def test_extract_contact_removes_all_occurrences():
    text = "Call 0215551234 now. Call 0215551234 now."
    contact, remaining = extract_contact_info(text)
    assert contact == "Call 0215551234 Call 0215551234"
    assert "0215551234" not in remaining


def test_extract_contact_none():
    contact, remaining = extract_contact_info("No way to reach us here.")
    assert contact == ""
    assert remaining == "No way to reach us here."


def test_extract_contact_lookahead_is_bounded():
    text = "Contact us. " + "Lorem ipsum dolor sit amet. " * 20 + "0215551234"
    contact, _ = extract_contact_info(text)
    assert contact == ""


# --- Section windows ---

def test_extract_section_keyword_priority():
    text = "Duties are listed below. Responsibilities - Maintain hospital equipment daily"
    match = extract_section(text, "responsibilities")
    assert match.group().startswith("Responsibilities")


def test_extract_section_window_is_bounded():
    text = "Duties " + "x" * 600
    match = extract_section(text, "responsibilities")
    assert len(match.group()) == len("duties") + 500


def test_extract_section_missing():
    assert extract_section("Nothing relevant here", "skills") is None


# --- List items ---

def test_extract_list_items_length_band():
    section = (
        "Skills - Excel - Advanced spreadsheet modelling - abcdefghij - " + "x" * 150
    )
    assert extract_list_items(section) == ["Advanced spreadsheet modelling", "abcdefghij"]


def test_extract_list_items_bullet_variants():
    section = "• Operate the forklift safely · Load delivery trucks daily"
    assert extract_list_items(section) == [
        "Operate the forklift safely",
        "Load delivery trucks daily",
    ]


def test_extract_list_items_capped():
    section = " ".join(f"- Task number {i} for the team" for i in range(12))
    assert len(extract_list_items(section)) == MAX_ITEMS


# --- Full partition ---

def test_bulleted_responsibilities_in_order():
    sections = identify_content_sections(BULLETED_RESPONSIBILITIES)
    assert sections.responsibilities[-3:] == [
        "Prepare monthly financial reports",
        "Reconcile supplier accounts weekly",
        "Assist with annual audit preparation",
    ]
    assert sections.overview == ""


def test_sequential_removal_separates_categories():
    text = (
        "Requirements - Valid forklift licence required - Matric certificate or equivalent. "
        "Duties - Operate forklifts in the warehouse - Load delivery trucks safely"
    )
    sections = identify_content_sections(text)
    assert sections.responsibilities == [
        "Operate forklifts in the warehouse",
        "Load delivery trucks safely",
    ]
    assert sections.requirements == [
        "Requirements",
        "Valid forklift licence required",
        "Matric certificate or equivalent.",
    ]
    assert sections.skills == []


def test_company_info_truncated():
    text = "We are " + "a" * 400
    sections = identify_content_sections(text)
    assert sections.company_info == text[:COMPANY_INFO_MAX]
    assert sections.overview == ""


def test_overview_is_leftover_text_truncated():
    text = "Lorem ipsum dolor sit amet. " * 20
    sections = identify_content_sections(text)
    assert sections.overview == text.strip()[:OVERVIEW_MAX]
    assert sections.responsibilities == []
    assert sections.company_info == ""


def test_contact_removed_before_sections():
    text = "Great opportunity in Durban. For more information contact Jane on 031 555 1234 today."
    sections = identify_content_sections(text)
    assert sections.contact_info == "contact Jane on 031 555 1234"
    assert "031" not in sections.overview
    assert sections.overview.startswith("Great opportunity in Durban.")


def test_application_info_not_detected():
    sections = identify_content_sections(BULLETED_RESPONSIBILITIES)
    assert sections.application_info == ""


def test_empty_content():
    sections = identify_content_sections("")
    assert sections.is_empty()
