from dataclasses import dataclass


@dataclass(frozen=True)
class SearchMatch:
    book: str
    chapter: str
    verse: str
    text: str

    @property
    def reference(self):
        return f"{self.book} {self.chapter}:{self.verse}"

    def to_json(self):
        return {
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "text": self.text,
        }
