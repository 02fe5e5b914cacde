"""Course Catalog Fixtures - the fixed course set written by the seed utility.

Invariants:
    - Every fixture starts with enrolled_count == 0
    - Course codes are unique (the courses table enforces it too)
"""

SAMPLE_COURSES: tuple[dict, ...] = (
    {
        "code": "CS101",
        "name": "Introduction to Computer Science",
        "description": "Fundamental concepts of programming and computational thinking.",
        "credits": 3,
        "capacity": 50,
        "enrolled_count": 0,
        "instructor": "Dr. Sarah Chen",
        "schedule": "Mon/Wed 9:00 AM - 10:30 AM",
        "semester": "Spring 2026",
    },
    {
        "code": "CS201",
        "name": "Data Structures and Algorithms",
        "description": "Study of data organization, storage, and efficient algorithms.",
        "credits": 4,
        "capacity": 40,
        "enrolled_count": 0,
        "instructor": "Prof. Michael Lee",
        "schedule": "Tue/Thu 11:00 AM - 12:30 PM",
        "semester": "Spring 2026",
    },
    {
        "code": "MATH201",
        "name": "Calculus II",
        "description": "Integral calculus, sequences, series, and applications.",
        "credits": 4,
        "capacity": 45,
        "enrolled_count": 0,
        "instructor": "Dr. Emily Watson",
        "schedule": "Mon/Wed/Fri 10:00 AM - 11:00 AM",
        "semester": "Spring 2026",
    },
    {
        "code": "ENG101",
        "name": "Academic Writing",
        "description": "Fundamentals of academic writing and research methods.",
        "credits": 3,
        "capacity": 30,
        "enrolled_count": 0,
        "instructor": "Prof. James Miller",
        "schedule": "Tue/Thu 2:00 PM - 3:30 PM",
        "semester": "Spring 2026",
    },
    {
        "code": "PHYS101",
        "name": "Physics I: Mechanics",
        "description": "Introduction to classical mechanics, motion, and forces.",
        "credits": 4,
        "capacity": 40,
        "enrolled_count": 0,
        "instructor": "Dr. Robert Kim",
        "schedule": "Mon/Wed 1:00 PM - 2:30 PM",
        "semester": "Spring 2026",
    },
    {
        "code": "CS301",
        "name": "Database Systems",
        "description": "Relational databases, SQL, and database design principles.",
        "credits": 3,
        "capacity": 35,
        "enrolled_count": 0,
        "instructor": "Dr. Lisa Park",
        "schedule": "Tue/Thu 9:00 AM - 10:30 AM",
        "semester": "Spring 2026",
    },
)


def describe_course(course: dict) -> str:
    """Summary line used in seed responses, e.g. 'CS101: Introduction to ...'."""
    return f"{course['code']}: {course['name']}"
