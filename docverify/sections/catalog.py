from docverify.sections.models import SectionSpec

SECTION_CATALOG: tuple[SectionSpec, ...] = (
    SectionSpec(
        title="Payment Terms",
        key="payment",
        description="Payment schedule, amounts, methods, and terms",
    ),
    SectionSpec(
        title="Contract Duration",
        key="duration",
        description="Start date, end date, renewal terms, and extension conditions",
    ),
    SectionSpec(
        title="Confidentiality Clause",
        key="confidentiality",
        description="Non-disclosure terms, data protection, and privacy measures",
    ),
    SectionSpec(
        title="Termination Clause",
        key="termination",
        description="Termination conditions, notice periods, and exit procedures",
    ),
    SectionSpec(
        title="Dispute Resolution",
        key="dispute",
        description="Arbitration, mediation, governing law, and jurisdiction",
    ),
    SectionSpec(
        title="Liability & Indemnification",
        key="liability",
        description="Liability limits, indemnification, and insurance requirements",
    ),
    SectionSpec(
        title="Intellectual Property",
        key="intellectual",
        description="IP ownership, licensing, and usage rights",
    ),
    SectionSpec(
        title="Compliance & Regulations",
        key="compliance",
        description="Regulatory compliance, audit rights, and reporting requirements",
    ),
)

SECTION_KEYS: tuple[str, ...] = tuple(spec.key for spec in SECTION_CATALOG)
