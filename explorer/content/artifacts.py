"""
Artifact registry and default scene placement.

ARTIFACT_INFO maps a type id to the text shown when the artifact is inspected.
DEFAULT_SCENE places one marker of each type along the world, in registry order.
"""

ARTIFACT_INFO = {
    "cuneiform": {
        "name": "Cuneiform Tablet",
        "description": (
            "Cuneiform was one of the world's first writing systems, invented in Mesopotamia. "
            "Scribes pressed wedge-shaped marks into clay tablets to record trades, laws, stories "
            "like the Epic of Gilgamesh, and more. Every time you write on paper or type on a "
            "keyboard, you're using an idea that started here!"
        ),
    },
    "plow": {
        "name": "The Plow",
        "description": (
            "The plow allowed Mesopotamian farmers to dig into the soil more easily and plant more "
            "crops. This meant more food, larger cities, and more people. Modern tractors and "
            "farming machines are high-tech versions of this early tool."
        ),
    },
    "irrigation": {
        "name": "Irrigation Gate",
        "description": (
            "Irrigation systems in Mesopotamia used canals and gates to control the water from the "
            "Tigris and Euphrates rivers. This turned dry land into farmland and made big "
            "civilizations possible. Modern sprinklers, dams, and canals still use the same basic idea."
        ),
    },
    "wheel": {
        "name": "The Wheel",
        "description": (
            "The wheel first appeared in Mesopotamia and was used for things like pottery and carts. "
            "Today, wheels and wheel-like parts (like gears) are everywhere - cars, bikes, engines, "
            "watches, and even hard drives. Without the wheel, travel and machines would be "
            "completely different."
        ),
    },
    "math": {
        "name": "Math Tablet",
        "description": (
            "Mesopotamian mathematicians developed a base-60 number system. That's why we have 60 "
            "seconds in a minute, 60 minutes in an hour, and 360 degrees in a circle. Their work "
            "helped inspire later math like algebra, which modern science, engineering, and "
            "technology depend on."
        ),
    },
}

# (type, world x) markers, left to right.
DEFAULT_SCENE = [
    {"type": "cuneiform", "x": 320},
    {"type": "plow", "x": 760},
    {"type": "irrigation", "x": 1200},
    {"type": "wheel", "x": 1640},
    {"type": "math", "x": 2080},
]
