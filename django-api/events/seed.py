"""Built-in seed catalog shown before (and merged with) remote events."""

from events.domain import Event, EventCategory

SEED_EVENTS: tuple[Event, ...] = (
    Event(
        id="ev1",
        title="CodeStorm 2026 Hackathon",
        category=EventCategory.HACKATHONS,
        date="2026-02-10",
        time="09:00 AM - 09:00 PM",
        location="Auditorium A, Tech Campus",
        organizer_name="Dev Club",
        organizer_contact="devclub@example.com",
        description="A 12-hour coding marathon where teams build innovative solutions.",
        poster_url="/events/hackathon_poster.png",
        brochure_url="#",
        prizes="1st Place: $3000, 2nd Place: $1500, 3rd Place: $500",
        registration_fee="Free",
        team_size="2-4 members",
        image_url="/events/hackathon_poster.png",
        created_by_uid="organizer-demo-1",
    ),
    Event(
        id="ev2",
        title="Canvas Chronicles - Art Competition",
        category=EventCategory.ART_COMPETITIONS,
        date="2026-02-15",
        time="11:00 AM - 02:00 PM",
        location="Design Studio, Block C",
        organizer_name="Fine Arts Society",
        organizer_contact="arts@example.com",
        description=(
            "Showcase your creativity across painting, sketching, "
            "and digital illustration."
        ),
        about_event=(
            "Join us for a day of artistic expression. "
            "This year's theme is 'FutureScapes'. "
            "Categories include Oil Painting, Watercolor, and Digital Art."
        ),
        poster_url="/events/art_poster.png",
        brochure_url="#",
        prizes="Best in Show: Art Supply Kit ($200 value)",
        registration_fee="$10",
        team_size="Individual",
        image_url="/events/art_poster.png",
        created_by_uid="organizer-demo-2",
    ),
    Event(
        id="ev3",
        title="RhythmVerse - Dance & Music Night",
        category=EventCategory.DANCE_AND_MUSIC,
        date="2026-02-18",
        time="06:00 PM - 10:00 PM",
        location="Open Air Theatre",
        organizer_name="Cultural Committee",
        organizer_contact="culture@example.com",
        description=(
            "An evening packed with bands, solo performances, "
            "and group dance showcases."
        ),
        about_event=(
            "From classical melodies to rock anthems, "
            "and folk dances to hip-hop face-offs."
        ),
        poster_url="/events/music_poster.png",
        brochure_url="#",
        prizes="Best Band: Studio Recording Time",
        registration_fee="$50 per team",
        team_size="Unlimited",
        image_url="/events/music_poster.png",
        created_by_uid="organizer-demo-1",
    ),
    Event(
        id="ev4",
        title="Fusion Fiesta - Cultural Carnival",
        category=EventCategory.CULTURAL_EVENTS,
        date="2026-02-21",
        time="10:00 AM - 05:00 PM",
        location="Central Lawn",
        organizer_name="Student Council",
        organizer_contact="council@example.com",
        description=(
            "Experience a melting pot of cultures with food stalls, "
            "fashion walk, and games."
        ),
        poster_url="/events/culture_poster.png",
        brochure_url="#",
        prizes="Trophies and Certificates",
        registration_fee="Free entry",
        team_size="N/A",
        image_url="/events/culture_poster.png",
        created_by_uid="organizer-demo-3",
    ),
    Event(
        id="ev5",
        title="NextGen Tech Summit",
        category=EventCategory.TECH_EVENTS,
        date="2026-02-25",
        time="10:00 AM - 04:00 PM",
        location="Innovation Lab",
        organizer_name="IEEE Student Chapter",
        organizer_contact="ieee@example.com",
        description=(
            "Talks and panel discussions on AI, Web3, and cloud-native systems."
        ),
        poster_url="/events/tech_poster.png",
        brochure_url="#",
        prizes="Networking opportunities",
        registration_fee="$25",
        team_size="Individual",
        image_url="/events/tech_poster.png",
        created_by_uid="organizer-demo-2",
    ),
    Event(
        id="ev6",
        title="Design Thinking Workshop",
        category=EventCategory.WORKSHOPS,
        date="2026-02-28",
        time="02:00 PM - 06:00 PM",
        location="Seminar Hall 2",
        organizer_name="Innovation Cell",
        organizer_contact="innovation@example.com",
        description=(
            "Hands-on workshop covering empathy mapping, ideation, "
            "and rapid prototyping."
        ),
        poster_url="/events/workshop_poster.png",
        brochure_url="#",
        rules="Bring your own laptop.",
        prizes="Certification of Completion",
        registration_fee="$15",
        team_size="Individual",
        image_url="/events/workshop_poster.png",
        created_by_uid="organizer-demo-1",
    ),
    Event(
        id="ev7",
        title="Inter-College Debate",
        category=EventCategory.CULTURAL_EVENTS,
        date="2026-03-05",
        time="10:00 AM - 01:00 PM",
        location="Main Auditorium",
        organizer_name="Debating Society",
        organizer_contact="debate@example.com",
        description="A battle of wits and words on trending global topics.",
        brochure_url="#",
        rules="Teams of 2. Standard Parliamentary Debate format.",
        prizes="Best Team: $500",
        registration_fee="Free",
        team_size="2 members",
        created_by_uid="organizer-demo-99",
    ),
)
