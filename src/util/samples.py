"""
Boilerplate for creating toy document collections to run the classification on.

Tags here are already normalized (``audiolength=short`` rather than a raw duration),
which is what the core expects to see.
"""

import random

from documents import Document, DocumentType, Tag

# (path, type, uses, tags) - a tag value of None is a bare tag, i.e. "defined"
TEST_COLLECTION1 = [
    ("song.mp3", "audio", 5, {"audiogenre": "pop", "audiolength": "short"}),
    ("podcast.mp3", "audio", 2, {"audiogenre": "talk", "audiolength": "long"}),
    ("holiday.jpg", "image", 3, {"imagesize": "medium", "private": None}),
    ("logo.png", "image", 7, {"imagesize": "icon"}),
    ("notes.txt", "text", 1, {"textgenre": "draft", "textlength": "short"}),
    ("run.sh", "program", 4, {"executable": None}),
]

# every document carries the same identifiers, so the undefined partitions stay empty
TEST_COLLECTION2 = [
    ("a.txt", "text", 4, {"textgenre": "novel", "textlength": "long"}),
    ("b.txt", "text", 4, {"textgenre": "novel", "textlength": "short"}),
    ("c.txt", "text", 2, {"textgenre": "essay", "textlength": "short"}),
    ("d.txt", "text", 1, {"textgenre": "essay", "textlength": "medium"}),
]

# attribute "grammar" for generated collections: type -> identifier -> possible values
TEST_ATTRIBUTES = {
    "audio": {
        "audiogenre": ["pop", "rock", "jazz", "talk"],
        "audiolength": ["sample", "short", "normal", "long"],
    },
    "image": {
        "imagesize": ["icon", "small", "medium", "large"],
        "camera": ["phone", "dslr"],
    },
    "video": {
        "videogenre": ["documentary", "comedy", "drama"],
        "videolength": ["clip", "short", "movie", "long"],
    },
    "text": {
        "textgenre": ["novel", "essay", "draft"],
        "textlength": ["short", "medium", "long"],
    },
    "program": {
        "executable": [None],
        "language": ["python", "java", "c"],
    },
}


def make_documents(rows):
    """Turns raw (path, type, uses, tags) rows into Documents."""
    documents = []
    for path, type_name, uses, tags in rows:
        documents.append(Document(
            path,
            tuple(Tag(identifier, value) for identifier, value in tags.items()),
            uses,
            DocumentType.from_string(type_name),
        ))
    return documents


def generate_row(index, rng, attributes=TEST_ATTRIBUTES, max_uses=20):
    """A random row: each identifier of the chosen type is present with probability 3/4."""
    type_name = rng.choice(sorted(attributes))
    tags = {}
    for identifier, values in attributes[type_name].items():
        if rng.random() < 0.75:
            tags[identifier] = rng.choice(values)
    return (f"{type_name}_{index}", type_name, rng.randint(1, max_uses), tags)


def generate_collection(n, seed=None, attributes=TEST_ATTRIBUTES, max_uses=20):
    """Generates ``n`` documents with unique paths; the same seed gives the same collection."""
    rng = random.Random(seed)
    return make_documents([generate_row(i, rng, attributes, max_uses) for i in range(n)])
