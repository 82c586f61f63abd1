"""Shared fixtures: two reference profiles scored against PE Operating Partner.

The current profile scores 37 overall and the optimized rewrite scores 92.
"""

import pytest

from profile_optimizer.profile.models import ExperienceEntry, Profile
from profile_optimizer.roles.registry import get_role

CURRENT_ABOUT = (
    "Greetings! I'm a dynamic Strategy & Operations Leader with a talent for harnessing technological "
    "advancements to drive organizational growth and innovation. With a track record spanning diverse "
    "industries, I specialize in crafting high-impact initiatives, innovative go-to-market strategies, "
    "and optimizing sales management.\n\n"
    "\U0001F50D What I Do:\n"
    "I orchestrate high-impact cross-functional initiatives to fuel value creation and strategic growth "
    "in various sectors.\n"
    "My passion lies in building and mentoring high-performing teams, empowering them to excel in "
    "implementing transformative strategies.\n"
    "I lead innovative cross-functional strategies for Technology, Retail, CPG, and Healthcare companies, "
    "always focusing on long-term value and impact.\n"
    "Cultivating and maintaining relationships with C-level executives is my forte, enabling the "
    "formulation and execution of long-term, impactful, and sustainable strategies.\n"
    "Distilling complex and unstructured data into powerful insights is second nature, informing "
    "decision-making and strategy development.\n\n"
    "\U0001F4A1 My Expertise Includes:\n"
    "Management Consulting & Strategic Growth\n"
    "Program & Project Management\n"
    "Business Strategy & Development\n"
    "Data Processing & Analysis\n"
    "Digital Strategy & B2B SaaS\n\n"
    "\U0001F31F Why I am Different:\n"
    "I bring together analytical prowess and creative thinking, allowing me to navigate ambiguity and "
    "devise scalable and efficient solutions.\n"
    "I'm a lifelong learner, constantly expanding my knowledge to adapt to the ever-evolving "
    "technological landscape.\n"
    "I firmly believe in the power of positive and insightful leadership to inspire high-performing "
    "teams and foster innovation.\n\n"
    "People who know me value my top-tier problem-solving and critical thinking skills, coupled with my "
    "ability to communicate proficiently, and engage at the executive level. I'm passionate about making "
    "each day count, learning, working, and helping others to create a net positive impact.\n\n"
    "Let's connect! I'm always open to meeting like-minded professionals, exploring collaborations, and "
    "discussing the latest in technology and strategy. Feel free to connect with me here on LinkedIn."
)

OPTIMIZED_ABOUT = (
    "I transform PE-backed middle-market businesses and build the AI systems that make the "
    "transformation stick at 10x speed.\n\n"
    "THE RESULTS\n"
    "Most recently at a PE-backed national lab services platform, I'm leading enterprise-wide "
    "transformation delivering 60-80% EBITDA improvement in under 18 months across pricing, operations, "
    "commercial excellence, and technology.\n\n"
    "Previously, I drove the full operational turnaround of a PE-backed specialty manufacturer, doubling "
    "EBITDA in 10 months through pricing intelligence, sales effectiveness, and process automation.\n\n"
    "WHAT I ACTUALLY BUILD\n"
    "Most transformation executives make slides. I make slides AND ship production software.\n\n"
    "I've personally architected and deployed:\n"
    "- AI-powered value creation platform managing 20+ concurrent transformation workstreams\n"
    "- Automated quoting engine cutting customer response from days to minutes\n"
    "- M&A target intelligence system for PE deal origination and screening\n"
    "- Real-time BI dashboards replacing manual board reporting\n"
    "- Pricing optimization, procurement intelligence, and sales prospecting tools\n\n"
    "These aren't proofs of concept. They're live systems running in production today.\n\n"
    "WHERE I CREATE VALUE\n"
    "- Post-acquisition 100-day plans and operational transformation\n"
    "- Pricing and commercial excellence (margin expansion)\n"
    "- AI/automation for operational leverage at enterprise scale\n"
    "- Cross-functional program management across ops, tech, and commercial\n"
    "- Due diligence support (operational, commercial, technology)\n\n"
    "BACKGROUND\n"
    "Bain & Company (management consulting) serving Fortune 500 and PE clients across technology, "
    "industrial, and healthcare sectors. Wharton MBA. Bilingual English/Portuguese with deep US and "
    "Latin America market experience."
)

OPTIMIZED_EXPERIENCE = (
    ExperienceEntry(
        title="SVP Transformation",
        company="PE-Backed National Lab Services Platform",
        duration_months=18,
        description=(
            "Leading enterprise-wide transformation of a PE-backed multi-site lab services platform, "
            "delivering 60-80% EBITDA improvement across all operational and commercial functions.\n\n"
            "- Spearheading 20+ concurrent value creation workstreams across pricing, procurement, staffing, "
            "commercial excellence, and operational efficiency\n"
            "- Built and deployed AI-powered initiative tracking platform managing the full transformation "
            "portfolio with real-time board reporting\n"
            "- Architected automated quoting system reducing lab quote turnaround from days to minutes\n"
            "- Led pricing reset and profitability optimization across the entire service portfolio\n"
            "- Designed business intelligence platforms for food labs, agriculture labs, and sales "
            "operations, replacing manual reporting with real-time dashboards\n"
            "- Driving procurement optimization and staffing/capacity analytics programs\n"
            "- Preparing and presenting board materials and investor updates on value creation progress"
        ),
        is_current=True,
    ),
    ExperienceEntry(
        title="VP Operations",
        company="PE-Backed Specialty Manufacturer",
        duration_months=10,
        description=(
            "Drove full operational turnaround of a PE-backed specialty manufacturer.\n\n"
            "- Doubled EBITDA within 10 months through integrated pricing, commercial, and operational "
            "transformation\n"
            "- Led pricing intelligence implementation capturing significant margin expansion\n"
            "- Redesigned sales processes and go-to-market strategy for key accounts\n"
            "- Implemented process automation reducing manual operations and improving throughput\n"
            "- Managed cross-functional execution across sales, operations, and finance"
        ),
    ),
    ExperienceEntry(
        title="Consultant / Senior Associate",
        company="Bain & Company",
        duration_months=36,
        description=(
            "Management consultant serving Fortune 500 and PE clients on strategy, operations, and "
            "transformation across technology, industrial, and healthcare sectors.\n\n"
            "- Led due diligence and post-acquisition value creation planning for PE sponsors\n"
            "- Developed go-to-market strategies, pricing optimization, and operational improvement "
            "programs for portfolio companies\n"
            "- Managed cross-functional teams of 5-15 on high-impact strategic initiatives\n"
            "- Specialized in technology, retail/CPG, and healthcare transformation engagements\n"
            "- Built analytical models and executive presentations for C-suite and board audiences"
        ),
    ),
)

OPTIMIZED_SKILLS = (
    "Value Creation", "Private Equity", "Enterprise Transformation",
    "Strategic Planning", "Due Diligence", "M&A Integration",
    "Post-Merger Integration", "Investment Thesis", "Portfolio Management",
    "Business Strategy", "Corporate Strategy", "Growth Strategy",
    "Market Entry Strategy", "Operational Excellence", "P&L Management",
    "EBITDA Improvement", "Cost Optimization", "Pricing Strategy",
    "Supply Chain Management", "Process Improvement", "Lean Operations",
    "Change Management", "Organizational Transformation",
    "Revenue Growth", "Commercial Excellence", "Go-to-Market Strategy",
    "Sales Strategy", "Business Development", "Customer Strategy",
    "Market Analysis", "Competitive Intelligence",
    "Digital Transformation", "Artificial Intelligence", "AI Implementation",
    "Data Analytics", "Business Intelligence", "Process Automation",
    "Technology Strategy", "Software Development",
    "Executive Leadership", "Cross-Functional Leadership", "Team Building",
    "Stakeholder Management", "Board Reporting", "Program Management",
    "Project Management", "Management Consulting", "Financial Modeling",
    "Lab Services", "Manufacturing",
)


def make_current_profile() -> Profile:
    return Profile(
        name="Thiago Rocha",
        headline="Dynamic Strategy & Operations Leader | Innovator | Relationship Builder",
        about=CURRENT_ABOUT,
        experience=(
            ExperienceEntry(
                title="SVP Transformation",
                company="PE-Backed Lab Services Platform",
                duration_months=18,
                description="Leading transformation initiatives across the organization.",
                is_current=True,
            ),
            ExperienceEntry(
                title="VP Operations",
                company="PE-Backed Specialty Manufacturer",
                duration_months=10,
                description="Drove operational turnaround.",
            ),
            ExperienceEntry(
                title="Consultant",
                company="Bain & Company",
                duration_months=36,
                description="Management consulting across technology, retail, and healthcare sectors.",
            ),
        ),
        skills=(
            "Management Consulting", "Strategic Growth", "Program Management",
            "Business Strategy", "Data Processing", "Digital Strategy", "B2B SaaS",
            "Project Management", "Cross-functional Leadership",
        ),
        education=("MBA, The Wharton School",),
        recommendations_count=1,
        connections_count=400,
        has_profile_photo=True,
        has_custom_url=True,
    )


def make_optimized_profile() -> Profile:
    return Profile(
        name="Thiago Rocha",
        headline=(
            "PE Value Creation: 2x EBITDA (10mo), 80% Lift (18mo) | I Build the AI Systems That "
            "Transform Portfolio Operations | Bain | Wharton"
        ),
        about=OPTIMIZED_ABOUT,
        experience=OPTIMIZED_EXPERIENCE,
        skills=OPTIMIZED_SKILLS,
        education=("MBA, The Wharton School, University of Pennsylvania",),
        featured_items=3,
        recommendations_count=5,
        connections_count=500,
        has_profile_photo=True,
        has_banner=True,
        has_custom_url=True,
        has_verification=True,
        open_to_work=True,
        open_to_work_private=True,
        posts_per_month=2,
        comments_per_week=3,
    )


@pytest.fixture
def current_profile() -> Profile:
    return make_current_profile()


@pytest.fixture
def optimized_profile() -> Profile:
    return make_optimized_profile()


@pytest.fixture
def pe_role():
    return get_role("PE Operating Partner")


@pytest.fixture
def custom_role():
    return get_role("Custom")
