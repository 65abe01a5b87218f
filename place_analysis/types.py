"""
Typed containers for place analysis documents and quarterly financial series.

The JSON files keep the original camelCase / Norwegian keys; every record
exposes a ``from_dict`` constructor that maps them onto snake_case attributes.
Optional keys that are missing become ``None`` (or an empty list).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

SCREENSHOT_CATEGORIES = (
    "oversikt",
    "demografi",
    "marked",
    "bevegelse",
    "sosiodemografi",
    "konkurranse",
    "korthandel",
    "besokende",
    "internasjonal",
    "utvikling",
    "annet",
)


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)


@dataclass
class TimePeriod:
    type: str
    year: int
    start_date: str
    end_date: str
    label: str
    month: Optional[int] = None
    quarter: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimePeriod":
        return cls(
            type=data["type"],
            year=int(data["year"]),
            start_date=data["startDate"],
            end_date=data["endDate"],
            label=data["label"],
            month=_optional_int(data.get("month")),
            quarter=_optional_int(data.get("quarter")),
        )


@dataclass
class Coordinates:
    lat: float
    lng: float


@dataclass
class GeoJSON:
    type: str  # Polygon | MultiPolygon
    coordinates: list


@dataclass
class AreaDefinition:
    id: str
    name: str
    display_name: str
    type: str  # district | neighborhood | custom
    coordinates: Optional[Coordinates] = None
    boundaries: Optional[GeoJSON] = None
    sub_areas: List[str] = field(default_factory=list)
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AreaDefinition":
        coords = data.get("coordinates")
        bounds = data.get("boundaries")
        return cls(
            id=data["id"],
            name=data["name"],
            display_name=data.get("displayName", data["name"]),
            type=data.get("type", "district"),
            coordinates=Coordinates(float(coords["lat"]), float(coords["lng"])) if coords else None,
            boundaries=GeoJSON(bounds["type"], bounds["coordinates"]) if bounds else None,
            sub_areas=list(data.get("subAreas") or []),
            description=data.get("description"),
        )


@dataclass
class ScreenshotData:
    id: str
    filnavn: str
    path: str
    beskrivelse: str
    kategori: str
    timestamp: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScreenshotData":
        kategori = data.get("kategori", "annet")
        if kategori not in SCREENSHOT_CATEGORIES:
            kategori = "annet"
        return cls(
            id=data["id"],
            filnavn=data.get("filnavn", ""),
            path=data["path"],
            beskrivelse=data.get("beskrivelse", ""),
            kategori=kategori,
            timestamp=data.get("timestamp"),
        )


@dataclass
class KeyMetrics:
    befolkning: Optional[float] = None
    befolkning_vekst: Optional[float] = None  # percent
    gjennomsnittsinntekt: Optional[float] = None
    medianinntekt: Optional[float] = None
    arbeidsledighet: Optional[float] = None  # percent
    sysselsetting: Optional[float] = None  # percent
    utdanningsniva: Optional[Dict[str, float]] = None
    husholdninger: Optional[float] = None
    daglig_trafikk: Optional[float] = None
    handelsomsetning: Optional[float] = None
    besokende: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyMetrics":
        return cls(
            befolkning=_optional_float(data.get("befolkning")),
            befolkning_vekst=_optional_float(data.get("befolkningVekst")),
            gjennomsnittsinntekt=_optional_float(data.get("gjennomsnittsinntekt")),
            medianinntekt=_optional_float(data.get("medianinntekt")),
            arbeidsledighet=_optional_float(data.get("arbeidsledighet")),
            sysselsetting=_optional_float(data.get("sysselsetting")),
            utdanningsniva=data.get("utdanningsniva"),
            husholdninger=_optional_float(data.get("husholdninger")),
            daglig_trafikk=_optional_float(data.get("dagligTrafikk")),
            handelsomsetning=_optional_float(data.get("handelsomsetning")),
            besokende=_optional_float(data.get("besokende")),
        )


@dataclass
class DemographicMetrics:
    total_befolkning: float
    befolkningsutvikling: float  # percent change
    aldersfordeling: Dict[str, float]
    husstandsstorrelse: float
    innvandrerandel: Optional[float] = None
    familietyper: Optional[Dict[str, float]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DemographicMetrics":
        return cls(
            total_befolkning=float(data["totalBefolkning"]),
            befolkningsutvikling=float(data["befolkningsutvikling"]),
            aldersfordeling=dict(data.get("aldersfordeling") or {}),
            husstandsstorrelse=float(data["husstandsstorrelse"]),
            innvandrerandel=_optional_float(data.get("innvandrerandel")),
            familietyper=data.get("familietyper"),
        )


@dataclass
class MarketMetrics:
    omsetning: Optional[float] = None
    omsetning_vekst: Optional[float] = None
    transaksjoner: Optional[float] = None
    prisutvikling_prosent: Optional[float] = None
    kvadratmeterpris: Optional[float] = None
    leiepris_kvadratmeter: Optional[float] = None
    antall_virksomheter: Optional[int] = None
    virksomhetsfordeling: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarketMetrics":
        return cls(
            omsetning=_optional_float(data.get("omsetning")),
            omsetning_vekst=_optional_float(data.get("omsetningVekst")),
            transaksjoner=_optional_float(data.get("transaksjoner")),
            prisutvikling_prosent=_optional_float(data.get("prisutviklingProsent")),
            kvadratmeterpris=_optional_float(data.get("kvadratmeterpris")),
            leiepris_kvadratmeter=_optional_float(data.get("leieprisKvadratmeter")),
            antall_virksomheter=_optional_int(data.get("antallVirksomheter")),
            virksomhetsfordeling=list(data.get("virksomhetsfordeling") or []),
        )


@dataclass
class MovementMetrics:
    daglig_trafikk: Optional[float] = None
    topp_trafikktimer: List[str] = field(default_factory=list)
    gang_trafikk: Optional[float] = None
    sykkel_trafikk: Optional[float] = None
    kollektivtrafikk: Optional[float] = None
    besoksmonster: Optional[Dict[str, float]] = None
    oppholdstid: Optional[Dict[str, float]] = None  # minutes

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MovementMetrics":
        return cls(
            daglig_trafikk=_optional_float(data.get("dagligTrafikk")),
            topp_trafikktimer=list(data.get("toppTrafikktimer") or []),
            gang_trafikk=_optional_float(data.get("gangTrafikk")),
            sykkel_trafikk=_optional_float(data.get("sykkelTrafikk")),
            kollektivtrafikk=_optional_float(data.get("kollektivtrafikk")),
            besoksmonster=data.get("besoksmønster") or data.get("besoksmonster"),
            oppholdstid=data.get("oppholdstid"),
        )


@dataclass
class SociodemographicMetrics:
    inntektsfordeling: Optional[Dict[str, float]] = None
    utdanningsniva: Optional[Dict[str, float]] = None
    yrkesfordeling: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SociodemographicMetrics":
        return cls(
            inntektsfordeling=data.get("inntektsfordeling"),
            utdanningsniva=data.get("utdanningsnivå") or data.get("utdanningsniva"),
            yrkesfordeling=list(data.get("yrkesfordeling") or []),
        )


@dataclass
class PlaaceMetrics:
    rapport_dato: str
    datakilder: List[str]
    screenshots: List[ScreenshotData]
    nokkeldata: Optional[KeyMetrics] = None
    demografi: Optional[DemographicMetrics] = None
    marked: Optional[MarketMetrics] = None
    bevegelse: Optional[MovementMetrics] = None
    sosiodemografi: Optional[SociodemographicMetrics] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlaaceMetrics":
        nokkeldata = data.get("nokkeldata")
        demografi = data.get("demografi")
        marked = data.get("marked")
        bevegelse = data.get("bevegelse")
        sosio = data.get("sosiodemografi")
        return cls(
            rapport_dato=data.get("rapportDato", ""),
            datakilder=list(data.get("datakilder") or []),
            screenshots=[ScreenshotData.from_dict(s) for s in data.get("screenshots") or []],
            nokkeldata=KeyMetrics.from_dict(nokkeldata) if nokkeldata is not None else None,
            demografi=DemographicMetrics.from_dict(demografi) if demografi else None,
            marked=MarketMetrics.from_dict(marked) if marked else None,
            bevegelse=MovementMetrics.from_dict(bevegelse) if bevegelse else None,
            sosiodemografi=SociodemographicMetrics.from_dict(sosio) if sosio else None,
        )


@dataclass
class ComparisonMetric:
    metric: str
    baseline: float
    comparison: float
    difference: float
    percentage_difference: float


@dataclass
class ComparisonData:
    id: str
    type: str  # area | temporal
    compare_with: Dict[str, str]
    metrics: List[ComparisonMetric]
    summary: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComparisonData":
        metrics = [
            ComparisonMetric(
                metric=m["metric"],
                baseline=float(m["baseline"]),
                comparison=float(m["comparison"]),
                difference=float(m["difference"]),
                percentage_difference=float(m["percentageDifference"]),
            )
            for m in data.get("metrics") or []
        ]
        return cls(
            id=data["id"],
            type=data["type"],
            compare_with=dict(data.get("compareWith") or {}),
            metrics=metrics,
            summary=data.get("summary", ""),
        )


@dataclass
class EventReference:
    id: str
    title: str
    date: str
    type: str  # cultural | commercial | infrastructure | social | policy
    impact_level: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventReference":
        return cls(
            id=data["id"],
            title=data["title"],
            date=data["date"],
            type=data["type"],
            impact_level=data.get("impactLevel"),
            description=data.get("description"),
        )


@dataclass
class MediaReference:
    id: str
    title: str
    source: str
    publish_date: str
    url: Optional[str] = None
    sentiment: Optional[str] = None
    topics: List[str] = field(default_factory=list)
    excerpt: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaReference":
        return cls(
            id=data["id"],
            title=data["title"],
            source=data["source"],
            publish_date=data["publishDate"],
            url=data.get("url"),
            sentiment=data.get("sentiment"),
            topics=list(data.get("topics") or []),
            excerpt=data.get("excerpt"),
        )


@dataclass
class AnalysisMetadata:
    opprettet: str
    sist_oppdatert: str
    status: str
    versjon: int
    kilde: List[str] = field(default_factory=list)
    forfatter: Optional[str] = None
    notater: List[str] = field(default_factory=list)
    hero_image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisMetadata":
        return cls(
            opprettet=data["opprettet"],
            sist_oppdatert=data["sistOppdatert"],
            status=data.get("status", "utkast"),
            versjon=int(data.get("versjon", 1)),
            kilde=list(data.get("kilde") or []),
            forfatter=data.get("forfatter"),
            notater=list(data.get("notater") or []),
            hero_image=data.get("heroImage"),
        )


@dataclass
class PlaceAnalysis:
    id: str
    title: str
    analysis_type: str
    period: TimePeriod
    area: AreaDefinition
    plaace_data: PlaaceMetrics
    metadata: AnalysisMetadata
    comparisons: List[ComparisonData] = field(default_factory=list)
    events: List[EventReference] = field(default_factory=list)
    media: List[MediaReference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlaceAnalysis":
        return cls(
            id=data["id"],
            title=data["title"],
            analysis_type=data.get("analysisType", "timeline"),
            period=TimePeriod.from_dict(data["period"]),
            area=AreaDefinition.from_dict(data["area"]),
            plaace_data=PlaaceMetrics.from_dict(data["plaaceData"]),
            metadata=AnalysisMetadata.from_dict(data["metadata"]),
            comparisons=[ComparisonData.from_dict(c) for c in data.get("comparisons") or []],
            events=[EventReference.from_dict(e) for e in data.get("events") or []],
            media=[MediaReference.from_dict(m) for m in data.get("media") or []],
        )


@dataclass
class QuarterlyDataPoint:
    year: int
    quarter: int  # 1-4
    quarter_label: str
    amount: float  # 0 means "not collected yet"
    transaction_count: Optional[int] = None
    average_transaction: Optional[float] = None
    note: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuarterlyDataPoint":
        quarter = int(data["quarter"])
        if quarter not in (1, 2, 3, 4):
            raise ValueError(f"quarter must be 1-4, got {quarter}")
        year = int(data["year"])
        return cls(
            year=year,
            quarter=quarter,
            quarter_label=data.get("quarterLabel") or f"{year} Q{quarter}",
            amount=float(data.get("amount") or 0),
            transaction_count=_optional_int(data.get("transactionCount")),
            average_transaction=_optional_float(data.get("averageTransaction")),
            note=data.get("note"),
        )


@dataclass
class QuarterlyMetadata:
    title: str
    period: str
    area: str
    currency: str
    data_source: str
    last_updated: str
    notes: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuarterlyMetadata":
        return cls(
            title=data.get("title", ""),
            period=data.get("period", ""),
            area=data.get("area", ""),
            currency=data.get("currency", "NOK"),
            data_source=data.get("dataSource", ""),
            last_updated=data.get("lastUpdated", ""),
            notes=list(data.get("notes") or []),
        )


@dataclass
class QuarterlySeries:
    metadata: QuarterlyMetadata
    data: List[QuarterlyDataPoint]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuarterlySeries":
        return cls(
            metadata=QuarterlyMetadata.from_dict(data.get("metadata") or {}),
            data=[QuarterlyDataPoint.from_dict(p) for p in data.get("data") or []],
        )


@dataclass
class ActorOverview:
    actors: List[Dict[str, Any]]
    category_stats: List[Dict[str, Any]]
    metadata: Dict[str, Any]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActorOverview":
        stats = data.get("categoryStats") or []
        # categoryStats is stored either as a list of rows or keyed by category
        if isinstance(stats, dict):
            stats = [{"kategori": key, **value} for key, value in stats.items()]
        return cls(
            actors=list(data.get("actors") or []),
            category_stats=list(stats),
            metadata=dict(data.get("metadata") or {}),
        )
