"""
Demo student profiles for seeding a fresh profile store.
"""

from loguru import logger

from shared.models import Profile


def _profile(name: str, **fields) -> Profile:
    slug = name.lower().replace(" ", "-")
    return Profile(
        id=f"seed-{slug}",
        name=name,
        email=f"{slug.replace('-', '.')}.seed@example.com",
        **fields,
    )


SAMPLE_PROFILES: list[Profile] = [
    # CS students who should come up for hackathon searches
    _profile(
        "Alex Chen",
        major="Computer Science",
        year="Junior",
        bio=(
            "Passionate CS student looking for hackathon teammates. Experienced in "
            "React, Node.js, and Python. Love building web apps and solving complex "
            "problems."
        ),
        tags=["AI", "Robotics", "React", "Python", "Hackathon", "Web Development"],
        looking_for=["Study friends", "Gaming buddies"],
    ),
    _profile(
        "Jordan Martinez",
        major="Computer Science",
        year="Sophomore",
        bio=(
            "CS major interested in hackathons and collaborative projects. Strong in "
            "backend development and databases. Always looking for teammates for "
            "coding competitions."
        ),
        tags=["Embedded Systems", "AI", "Python", "Hackathon", "Project"],
        looking_for=["Study friends", "Hobby groups"],
    ),
    _profile(
        "Sam Taylor",
        major="Business",
        year="Senior",
        bio=(
            "Business major with a passion for entrepreneurship. Love networking and "
            "meeting new people."
        ),
        tags=["Coffee", "Movies", "Reading"],
        looking_for=["Watch parties", "Deep conversation groups"],
    ),
    _profile(
        "Morgan Lee",
        major="Engineering",
        year="Junior",
        bio=(
            "Engineering student who loves sports and fitness. Looking for gym buddies "
            "and sports fans."
        ),
        tags=["Gym", "Soccer", "Champions League", "F1"],
        looking_for=["Sports fans", "Hobby groups"],
    ),
    _profile(
        "Riley Johnson",
        major="Psychology",
        year="Sophomore",
        bio=(
            "Psychology major interested in deep conversations and philosophy. Night "
            "owl who loves coffee."
        ),
        tags=["Philosophy", "Coffee", "Night Owl", "Reading"],
        looking_for=["Deep conversation groups", "Study friends"],
    ),
    _profile(
        "Casey Williams",
        major="Music",
        year="Senior",
        bio=(
            "Music major who loves all genres. Always down to discuss music and go to "
            "concerts."
        ),
        tags=["Metal", "Rammstein", "Classical", "Hip-Hop", "Jazz"],
        looking_for=["Hobby groups", "Watch parties"],
    ),
    _profile(
        "Taylor Brown",
        major="Mathematics",
        year="Junior",
        bio=(
            "Math major who enjoys gaming and coding in my free time. Looking for "
            "study partners."
        ),
        tags=["Valorant", "League of Legends", "AI", "Philosophy"],
        looking_for=["Study friends", "Gaming buddies"],
    ),
    _profile(
        "Jamie Davis",
        major="Biology",
        year="Sophomore",
        bio=(
            "Biology student who loves anime and movies. Looking for friends with "
            "similar interests."
        ),
        tags=["Anime", "Movies", "Reading", "Coffee"],
        looking_for=["Watch parties", "Hobby groups"],
    ),
    _profile(
        "Quinn Anderson",
        major="Physics",
        year="Senior",
        bio=(
            "Physics major interested in robotics and embedded systems. Love "
            "tinkering with hardware."
        ),
        tags=["Robotics", "Embedded Systems", "AI", "Gym"],
        looking_for=["Hobby groups", "Study friends"],
    ),
    _profile(
        "Avery Wilson",
        major="Economics",
        year="Junior",
        bio=(
            "Economics major who enjoys sports and gaming. Always up for watching "
            "games or playing together."
        ),
        tags=["NBA", "NFL", "Valorant", "Elden Ring", "Gym"],
        looking_for=["Sports fans", "Gaming buddies"],
    ),
]


async def seed_profiles(store) -> int:
    """
    Upsert the sample profiles.

    Returns:
        Number of profiles written
    """
    inserted = 0
    for profile in SAMPLE_PROFILES:
        was_inserted = await store.upsert_profile(profile)
        if was_inserted:
            inserted += 1
            logger.info(f"Created profile for {profile.name} ({profile.major})")
        else:
            logger.debug(f"Updated profile for {profile.name}")

    logger.info(
        f"Seeded {len(SAMPLE_PROFILES)} profiles ({inserted} new, "
        f"{len(SAMPLE_PROFILES) - inserted} updated)"
    )
    return len(SAMPLE_PROFILES)
