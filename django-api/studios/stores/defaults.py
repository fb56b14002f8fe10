"""Built-in catalogue used when no pricing content has been configured."""

DEFAULT_STUDIOS = [
    {
        "id": "studio-dock-one",
        "name": "Studio Dock One (E16)",
        "packages": [
            {"id": "minimum2hrs", "label": "Minimum 2 Hours", "hours": 2, "price": 15000},
            {"id": "halfday4hrs", "label": "Half Day (4 Hours)", "hours": 4, "price": 28000},
            {"id": "fullday8hrs", "label": "Full Day (8 Hours)", "hours": 8, "price": 50000},
        ],
    },
    {
        "id": "studio-dock-two",
        "name": "Studio Dock Two (E20)",
        "packages": [
            {"id": "minimum2hrs", "label": "Minimum 2 Hours", "hours": 2, "price": 15000},
            {"id": "halfday4hrs", "label": "Half Day (4 Hours)", "hours": 4, "price": 28000},
            {"id": "fullday8hrs", "label": "Full Day (8 Hours)", "hours": 8, "price": 50000},
        ],
    },
    {
        "id": "studio-wharf",
        "name": "Studio Wharf (LUX)",
        "packages": [
            {"id": "minimum2hrs", "label": "Minimum 2 Hours", "hours": 2, "price": 20000},
            {"id": "halfday4hrs", "label": "Half Day (4 Hours)", "hours": 4, "price": 38000},
            {"id": "fullday8hrs", "label": "Full Day (8 Hours)", "hours": 8, "price": 70000},
        ],
    },
]

DEFAULT_ADD_ONS = [
    {"id": "camera", "category": "cameraLens", "label": "Additional Camera & Lens", "price": 3000, "maxQuantity": 2},
    {"id": "switcher_half", "category": "videoSwitcher", "label": "Video Switcher Engineer - Half Day", "price": 3500, "maxQuantity": 1},
    {"id": "switcher_full", "category": "videoSwitcher", "label": "Video Switcher Engineer - Full Day", "price": 6000, "maxQuantity": 1},
    {"id": "teleprompter", "category": "accessories", "label": "Teleprompter", "price": 2500, "maxQuantity": 2},
    {"id": "guest", "category": "guests", "label": "Additional Guest (per person)", "price": 500, "maxQuantity": 10},
]
