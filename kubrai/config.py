"""Typed settings handed to every kubrai component."""

from __future__ import annotations

from dataclasses import dataclass

from kubrai.properties import DEFAULTS, Properties


@dataclass(frozen=True)
class KubraiConfig:
    separator: str = DEFAULTS["SolveKubrayaSeparator"]
    unknown_marker: str = DEFAULTS["GuessUnknownMarker"]
    lowercase: bool = DEFAULTS["AddAutoLowercase"]
    allow_self_association: bool = DEFAULTS["AddValMayEqualKey"]
    auto_both_maxlen: int = DEFAULTS["AddAutoBothMaxlen"]
    key_separator: str = DEFAULTS["AssocFileKeySeparator"]
    value_separator: str = DEFAULTS["AssocFileValSeparator"]
    backup_depth: int = DEFAULTS["AssocFileBackupDepth"]
    dicts_ext: str = DEFAULTS["DictsExt"]
    playbooks_dir: str = DEFAULTS["PlaybooksDir"]
    playbook_current: str = DEFAULTS["PlaybookCurrent"]
    solve_max_results: int = DEFAULTS["SolveMaxResults"]
    solve_auto_guess: bool = DEFAULTS["SolveAutoGuess"]
    guess_max_results: int = DEFAULTS["GuessMaxResults"]
    guess_unknowns_limit: int = DEFAULTS["GuessUnknownsLimit"]
    guess_explain_results: bool = DEFAULTS["GuessExplainResults"]
    searchdict_max_results: int = DEFAULTS["SearchDictDefaultMaxResults"]
    rank_by_frequency: bool = DEFAULTS["RankByFrequency"]
    wordfreq_lang: str = DEFAULTS["WordfreqLang"]
    build_dict_size: int = DEFAULTS["BuildDictSize"]
    show_progress: bool = DEFAULTS["ShowProgress"]

    @classmethod
    def from_properties(cls, props: Properties) -> "KubraiConfig":
        # Empty separators or marker would make splitting and pattern building meaningless.
        separator = props.as_string("SolveKubrayaSeparator") or DEFAULTS["SolveKubrayaSeparator"]
        marker = props.as_string("GuessUnknownMarker") or DEFAULTS["GuessUnknownMarker"]
        key_sep = props.as_string("AssocFileKeySeparator") or DEFAULTS["AssocFileKeySeparator"]
        val_sep = props.as_string("AssocFileValSeparator") or DEFAULTS["AssocFileValSeparator"]

        return cls(
            separator=separator,
            unknown_marker=marker,
            lowercase=props.as_bool("AddAutoLowercase"),
            allow_self_association=props.as_bool("AddValMayEqualKey"),
            auto_both_maxlen=props.as_int("AddAutoBothMaxlen"),
            key_separator=key_sep,
            value_separator=val_sep,
            backup_depth=props.as_int("AssocFileBackupDepth"),
            dicts_ext=props.as_string("DictsExt"),
            playbooks_dir=props.as_string("PlaybooksDir"),
            playbook_current=props.as_string("PlaybookCurrent"),
            solve_max_results=props.as_int("SolveMaxResults"),
            solve_auto_guess=props.as_bool("SolveAutoGuess"),
            guess_max_results=props.as_int("GuessMaxResults"),
            guess_unknowns_limit=props.as_int("GuessUnknownsLimit"),
            guess_explain_results=props.as_bool("GuessExplainResults"),
            searchdict_max_results=props.as_int("SearchDictDefaultMaxResults"),
            rank_by_frequency=props.as_bool("RankByFrequency"),
            wordfreq_lang=props.as_string("WordfreqLang"),
            build_dict_size=props.as_int("BuildDictSize"),
            show_progress=props.as_bool("ShowProgress"),
        )
