"""Default wordlist for passphrase generation.

256 short, lowercase English words (8 bits per word).
"""

DEFAULT_WORDLIST: tuple[str, ...] = (
    "acid", "acorn", "actor", "adobe", "agent", "alarm", "album", "alder",
    "alley", "amber", "anchor", "angle", "ankle", "apple", "apron", "arena",
    "arrow", "aspen", "atlas", "attic", "audio", "autumn", "avocado", "badge",
    "bagel", "baker", "bamboo", "banjo", "barley", "basil", "basin", "beach",
    "beacon", "beaver", "bench", "berry", "bison", "blade", "blanket", "blaze",
    "bloom", "board", "bonus", "border", "bottle", "brain", "branch", "bread",
    "brick", "bridge", "brook", "brush", "bucket", "bugle", "cabin", "cable",
    "cactus", "camel", "candle", "canoe", "canyon", "carbon", "cargo", "carpet",
    "castle", "cedar", "cello", "chalk", "charm", "cherry", "chess", "cider",
    "cinema", "circus", "citrus", "clover", "cobalt", "cocoa", "comet", "coral",
    "cotton", "crane", "crater", "crayon", "creek", "cricket", "crown", "cup",
    "dagger", "daisy", "delta", "denim", "desert", "dial", "diesel", "dingo",
    "docket", "dolphin", "domino", "donkey", "dragon", "drum", "dune", "eagle",
    "easel", "echo", "eclipse", "elbow", "elder", "ember", "emblem", "engine",
    "fabric", "falcon", "fennel", "fern", "ferry", "fiddle", "finch", "fjord",
    "flame", "flint", "flute", "forest", "fossil", "frost", "galaxy", "garden",
    "garlic", "gecko", "geyser", "ginger", "glacier", "globe", "goblet", "granite",
    "grape", "gravel", "guitar", "hammer", "harbor", "harp", "hazel", "helmet",
    "heron", "hollow", "honey", "horizon", "icicle", "igloo", "indigo", "island",
    "ivory", "jacket", "jasmine", "jelly", "jigsaw", "jungle", "juniper", "kayak",
    "kernel", "kettle", "kiwi", "koala", "ladder", "lagoon", "lantern", "lemon",
    "lentil", "lilac", "linen", "lobster", "locket", "lotus", "lunar", "magnet",
    "mango", "maple", "marble", "meadow", "melon", "mesa", "meteor", "mint",
    "mirror", "mosaic", "mosquito", "nectar", "needle", "nickel", "noodle", "nutmeg",
    "oasis", "ocean", "olive", "onion", "opal", "orbit", "orchid", "otter",
    "paddle", "panda", "paper", "parcel", "pebble", "pepper", "piano", "pickle",
    "pilot", "pine", "planet", "plaza", "pocket", "pollen", "pony", "prism",
    "pumpkin", "quartz", "quill", "rabbit", "radar", "raisin", "raven", "reef",
    "ribbon", "river", "robin", "rocket", "saddle", "salmon", "sandal", "satin",
    "scarf", "shadow", "silver", "sketch", "sled", "socket", "spruce", "squid",
    "staple", "stone", "summit", "tablet", "tango", "thistle", "thunder", "timber",
    "tulip", "tundra", "turnip", "velvet", "violet", "walnut", "willow", "zephyr",
)
