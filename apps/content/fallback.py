"""
Demo records shown when the content tables cannot be read
"""

NEWS_FALLBACK = [
    {
        "id": 1,
        "title": "Annual Cultural Function 2024",
        "content": (
            "Our college successfully organized the annual cultural function with great "
            "enthusiasm. Students participated in various cultural activities including "
            "dance, music, and drama performances."
        ),
        "category": "Cultural",
        "date": "2024-01-15",
        "created_at": "2024-01-15",
    },
    {
        "id": 2,
        "title": "Science Laboratory Inauguration",
        "content": (
            "New state-of-the-art science laboratory was inaugurated by the District "
            "Collector. The lab is equipped with modern equipment for physics, chemistry, "
            "and biology experiments."
        ),
        "category": "Laboratory",
        "date": "2024-01-10",
        "created_at": "2024-01-10",
    },
    {
        "id": 3,
        "title": "Teacher Training Workshop",
        "content": (
            "A comprehensive teacher training workshop was organized focusing on modern "
            "teaching methodologies and digital education tools."
        ),
        "category": "Training",
        "date": "2024-01-05",
        "created_at": "2024-01-05",
    },
]

_PEXELS = "https://images.pexels.com/photos/{0}?auto=compress&cs=tinysrgb&w=800"

GALLERY_FALLBACK = [
    {
        "id": 1,
        "title": "Annual Cultural Function",
        "description": "Students performing traditional dance at the annual cultural function",
        "image_url": _PEXELS.format("1708528/pexels-photo-1708528.jpeg"),
        "date": "2024-01-15",
        "created_at": "2024-01-15",
    },
    {
        "id": 2,
        "title": "Science Laboratory",
        "description": "Students conducting experiments in the newly inaugurated science laboratory",
        "image_url": _PEXELS.format("2280568/pexels-photo-2280568.jpeg"),
        "date": "2024-01-10",
        "created_at": "2024-01-10",
    },
    {
        "id": 3,
        "title": "Sports Day 2024",
        "description": "Annual sports day celebrations with various athletic competitions",
        "image_url": _PEXELS.format("163444/sport-treadmill-tor-route-163444.jpeg"),
        "date": "2024-01-08",
        "created_at": "2024-01-08",
    },
    {
        "id": 4,
        "title": "Classroom Activities",
        "description": "Interactive learning sessions in modern equipped classrooms",
        "image_url": _PEXELS.format("8926551/pexels-photo-8926551.jpeg"),
        "date": "2024-01-05",
        "created_at": "2024-01-05",
    },
    {
        "id": 5,
        "title": "Library Reading Session",
        "description": "Students engaged in reading and research in the college library",
        "image_url": _PEXELS.format("2883049/pexels-photo-2883049.jpeg"),
        "date": "2024-01-03",
        "created_at": "2024-01-03",
    },
    {
        "id": 6,
        "title": "Computer Lab Session",
        "description": "Students learning digital skills in the computer laboratory",
        "image_url": _PEXELS.format("4050289/pexels-photo-4050289.jpeg"),
        "date": "2024-01-01",
        "created_at": "2024-01-01",
    },
]

PROGRAMS_FALLBACK = [
    {
        "id": 1,
        "name": "Bachelor of Education (B.Ed)",
        "description": (
            "A comprehensive two-year program designed to prepare future teachers with "
            "modern pedagogical skills and educational methodologies."
        ),
        "duration": "2 Years",
        "eligibility": "Graduate with minimum 50% marks",
        "fee": 45000,
        "created_at": "2024-01-01",
    },
    {
        "id": 2,
        "name": "Diploma in Elementary Education (D.El.Ed)",
        "description": (
            "A specialized program focused on primary education teaching methods and "
            "child psychology for aspiring elementary teachers."
        ),
        "duration": "2 Years",
        "eligibility": "Higher Secondary (12th) with minimum 50% marks",
        "fee": 35000,
        "created_at": "2024-01-01",
    },
    {
        "id": 3,
        "name": "Certificate Course in Teaching",
        "description": (
            "Short-term certification program for working professionals looking to "
            "enhance their teaching skills and methodologies."
        ),
        "duration": "6 Months",
        "eligibility": "Graduate degree in any discipline",
        "fee": 15000,
        "created_at": "2024-01-01",
    },
]

CULTURAL_PROGRAMS_FALLBACK = [
    {
        "id": 1,
        "name": "Saraswati Puja Celebration",
        "description": "Traditional celebration with cultural performances by students and staff.",
        "type": "festival",
        "date": "2024-02-14",
        "time": "10:00 AM",
        "venue": "College Auditorium",
        "status": "upcoming",
        "eligibility": "All students and staff",
        "created_at": "2024-01-20",
    },
    {
        "id": 2,
        "name": "Folk Art Workshop",
        "description": "Hands-on workshop on Madhubani painting for trainee teachers.",
        "type": "workshop",
        "date": "2024-03-02",
        "time": "11:00 AM - 2:00 PM",
        "venue": "Art Room",
        "status": "upcoming",
        "eligibility": "B.Ed and D.El.Ed students",
        "created_at": "2024-01-20",
    },
    {
        "id": 3,
        "name": "Inter-College Debate Competition",
        "description": "Annual debate on contemporary issues in school education.",
        "type": "competition",
        "date": "2024-03-20",
        "time": "9:30 AM",
        "venue": "Seminar Hall",
        "status": "upcoming",
        "eligibility": "Registered teams from affiliated colleges",
        "created_at": "2024-01-20",
    },
]
