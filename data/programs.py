# Bundled program catalog
# Used when no Firestore service account is configured, and as seed data.
# Shape matches the stored documents: location_hotels wrap hotel lists in
# {"hotels": [...]} and pricing_combinations map raw keys to room prices.
# Key segments follow the program's location order; a comma-joined segment
# means any of those hotels shares the price.

PROGRAMS = {
    "umrah_july": {
        "title": "عمرة لشهر يوليوز",
        "description": "برنامج عمرة مع الإقامة في المدينة المنورة ومكة المكرمة",
        "image": "",
        "program_type": "umrah",
        "days": 16,
        "nights": 15,
        "locations": [
            {"name": "madinah", "label": "فندق المدينة المنورة"},
            {"name": "makkah",  "label": "فندق مكة المكرمة"},
        ],
        "packages": {
            "economy": {
                "location_hotels": {
                    "madinah": {"hotels": [{"name": "قصر الانصار او مايعادله"}]},
                    "makkah":  {"hotels": [{"name": "ابراج التيسير"}, {"name": "سفير المسك"}]},
                },
                "pricing_combinations": {
                    "قصر الانصار او مايعادله_ابراج التيسير": {
                        "quintuple": 13500, "quad": 14500, "triple": 15500, "double": 16500,
                    },
                    "قصر الانصار او مايعادله_سفير المسك": {
                        "quintuple": 14000, "quad": 15000, "triple": 16000, "double": 17000,
                    },
                },
            },
            "standard": {
                "location_hotels": {
                    "madinah": {"hotels": [{"name": "قصر الانصار او مايعادله"}]},
                    "makkah":  {"hotels": [{"name": "ميسان المقام"}]},
                },
                "pricing_combinations": {
                    "قصر الانصار او مايعادله_ميسان المقام": {
                        "quintuple": 16000, "quad": 17000, "triple": 18000, "double": 19500,
                    },
                },
            },
            "premium": {
                "location_hotels": {
                    "madinah": {"hotels": [{"name": "فندق العقيق او مايعادله (بالافطار)"}]},
                    "makkah":  {"hotels": [{"name": "فندق انجم (بالافطار)"}]},
                },
                "pricing_combinations": {
                    "فندق العقيق او مايعادله (بالافطار)_فندق انجم (بالافطار)": {
                        "quad": 22500, "triple": 23500, "double": 25500,
                    },
                },
            },
        },
        "includes": [
            "تذكرة الطيران ذهاب واياب",
            "السكن في المدينة المنورة ومكة المكرمة بالفنادق المذكورة اعلاه",
            "التأشيرة",
            "زيارة مدينة الطائف والقيام بعمرة تانية",
            "مرشد طيلة مدة الرحلة",
        ],
    },
    "turkey_tour_8d": {
        "title": "برنامج تركيا",
        "description": "جولة سياحية في اسطنبول لمدة ثمانية أيام",
        "image": "",
        "program_type": "tourism",
        "days": 8,
        "nights": 7,
        "locations": [
            {"name": "istanbul", "label": "فندق في اسطنبول"},
        ],
        "packages": {
            "comfort": {
                "location_hotels": {
                    "istanbul": {"hotels": [
                        {"name": "CVK Park Bosphorus Hotel (Comfort)"},
                        {"name": "Point Hotel Barbaros (Comfort)"},
                    ]},
                },
                "pricing_combinations": {
                    # either hotel, same price
                    "CVK Park Bosphorus Hotel (Comfort),Point Hotel Barbaros (Comfort)": {
                        "quintuple": 18000, "quad": 19000, "triple": 20000, "double": 22000,
                    },
                },
            },
            "luxury": {
                "location_hotels": {
                    "istanbul": {"hotels": [{"name": "Swissôtel The Bosphorus Istanbul (Luxury)"}]},
                },
                "pricing_combinations": {
                    "Swissôtel The Bosphorus Istanbul (Luxury)": {
                        "quad": 21000, "triple": 22000, "double": 25000,
                    },
                },
            },
        },
        "includes": [
            "تذكرة الطيران ذهاب واياب",
            "الاقامة في الفنادق المذكورة اعلاه مع الافطار",
            "رحلة بالباخرة في مضيق بوسفور",
            "زيارة المعالم الموجودة في المدينة (اية صوفيا، المسجد الازرق، قصر توبكابي...)",
        ],
    },
}
