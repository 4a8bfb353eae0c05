"""Transform raw play feed rows into GameEvent, PitchRecord and HitRecord."""

from typing import List, Tuple

from gameday.errors import EventParseError
from gameday.gameday_types import (
    GameEvent,
    Half,
    HitOutcome,
    HitOutcomeKind,
    HitRecord,
    PitchRecord,
    RawEvent,
    RawHit,
    RawPitch,
)
from gameday.transform.coerce import text, to_float, to_int, to_time

# Pitch attributes copied as optional floats, feed name == record field
PITCH_METRICS = (
    "type_confidence",
    "start_speed",
    "end_speed",
    "sz_top",
    "sz_bot",
    "pfx_x",
    "pfx_z",
    "px",
    "pz",
    "x0",
    "y0",
    "z0",
    "vx0",
    "vy0",
    "vz0",
    "ax",
    "ay",
    "az",
    "break_y",
    "break_angle",
    "break_length",
    "spin_dir",
    "spin_rate",
    "zone",
    "nasty",
    "x",
    "y",
)

# Whole codes, looked up before any substring matching
HIT_OUTCOME_CODES: dict[str, HitOutcomeKind] = {
    "OUT": HitOutcomeKind.OUT,
    "HIT": HitOutcomeKind.HIT,
    "HR": HitOutcomeKind.HIT,
    "ERROR": HitOutcomeKind.ERROR,
}

# Otherwise checked in this order and the first marker found decides the
# kind, so a code holding several markers ("HO") reads as OUT
HIT_OUTCOME_MARKERS: Tuple[Tuple[str, HitOutcomeKind], ...] = (
    ("O", HitOutcomeKind.OUT),
    ("H", HitOutcomeKind.HIT),
    ("E", HitOutcomeKind.ERROR),
)

# hitchart team flag -> half inning the batting team bats in
HIT_TEAM_HALVES: dict[str, Half] = {"A": "top", "H": "bottom"}


def classify_hit_outcome(code: str) -> HitOutcome:
    """Whole-code lookup, then substring markers; unknown codes are UNCLASSIFIED."""
    upper = code.strip().upper()
    if upper in HIT_OUTCOME_CODES:
        return HitOutcome(kind=HIT_OUTCOME_CODES[upper], code=code)
    for marker, kind in HIT_OUTCOME_MARKERS:
        if marker in upper:
            return HitOutcome(kind=kind, code=code)
    return HitOutcome(kind=HitOutcomeKind.UNCLASSIFIED, code=code)


def _inning(value: str, where: str) -> int:
    inning = to_int(value)
    if inning is None or inning < 1:
        raise EventParseError(f"{where}: bad inning number {value!r}")
    return inning


def _half(value: str, where: str) -> Half:
    if value == "top" or value == "bottom":
        return value
    raise EventParseError(f"{where}: bad half inning {value!r}")


def _required(attrs: dict[str, str], key: str, where: str) -> str:
    value = text(attrs.get(key))
    if not value:
        raise EventParseError(f"{where}: missing {key}")
    return value


def transform_events(raw_events: List[RawEvent]) -> List[GameEvent]:
    events: List[GameEvent] = []
    for i, raw in enumerate(raw_events):
        where = f"event[{i}]"
        attrs = raw["attrs"]
        kind = raw["kind"]
        if kind not in ("atbat", "action"):
            raise EventParseError(f"{where}: unknown entry <{kind}>")
        stamp = attrs.get("start_tfs_zulu") if kind == "atbat" else attrs.get("tfs_zulu")
        events.append(
            GameEvent(
                time=to_time(stamp),
                inning=_inning(raw["inning"], where),
                half=_half(raw["half"], where),
                number=to_int(attrs.get("event_num") or attrs.get("num")),
                balls=to_int(attrs.get("b")),
                strikes=to_int(attrs.get("s")),
                outs=to_int(attrs.get("o")),
                description=text(attrs.get("des")),
                kind=kind,
                event=text(attrs.get("event")),
            )
        )
    return events


def transform_pitches(raw_pitches: List[RawPitch]) -> List[PitchRecord]:
    """Build one PitchRecord per pitch. Unmeasured metrics stay None."""
    pitches: List[PitchRecord] = []
    for i, raw in enumerate(raw_pitches):
        where = f"pitch[{i}]"
        attrs = raw["attrs"]
        atbat = raw["atbat"]
        metrics = {name: to_float(attrs.get(name)) for name in PITCH_METRICS}
        pitches.append(
            PitchRecord(
                time=to_time(attrs.get("tfs_zulu")),
                inning=_inning(raw["inning"], where),
                half=_half(raw["half"], where),
                at_bat_number=to_int(atbat.get("num")),
                pitch_id=text(attrs.get("id")),
                pitcher_id=_required(atbat, "pitcher", where),
                batter_id=_required(atbat, "batter", where),
                description=text(attrs.get("des")),
                result=text(attrs.get("type")),
                pitch_type=text(attrs.get("pitch_type")) or None,
                cc=text(attrs.get("cc")),
                mt=text(attrs.get("mt")),
                **metrics,
            )
        )
    return pitches


def transform_hits(raw_hits: List[RawHit]) -> List[HitRecord]:
    hits: List[HitRecord] = []
    for i, raw in enumerate(raw_hits):
        where = f"hit[{i}]"
        attrs = raw["attrs"]
        team = text(attrs.get("team")).upper()
        if team not in HIT_TEAM_HALVES:
            raise EventParseError(f"{where}: bad team flag {attrs.get('team')!r}")
        hits.append(
            HitRecord(
                inning=_inning(text(attrs.get("inning")), where),
                half=HIT_TEAM_HALVES[team],
                pitcher_id=_required(attrs, "pitcher", where),
                batter_id=_required(attrs, "batter", where),
                outcome=classify_hit_outcome(text(attrs.get("type"))),
                description=text(attrs.get("des")),
                x=to_float(attrs.get("x")),
                y=to_float(attrs.get("y")),
            )
        )
    return hits
