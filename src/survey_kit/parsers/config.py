# src/survey_kit/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Placeholders and option markers used by the Markdown survey parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    default_title: str = "インポートされたアンケート"
    default_description: str = "ファイルからインポートされたアンケートです"
    default_section_title: str = "メインセクション"

    option_bullet: str = "□"
    # Any collecting-mode line containing the keyword appends the sentinel
    other_keyword: str = "その他"
    other_option: str = "その他"
