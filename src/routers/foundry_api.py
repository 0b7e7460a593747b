import secrets
from typing import Optional

from fastapi import Depends, HTTPException, APIRouter, Header, status, FastAPI
from fastapi.responses import JSONResponse

from lootgen import LootgenException
from lootgen.builder import make_builder
from lootgen.draw import draw_from_sources
from lootgen.generate import generate_loot
from lootgen.host import Host, MemoryDocumentStore
from lootgen.pricing import calculate_final_price_and_level
from lootgen.stacks import merge_existing_stacks
from models import EquipmentType
from models.api import (
    DrawRequest,
    LootPlan,
    MergeRequest,
    MergeResponse,
    EquipmentChoices,
    BuildRequest,
    BuildResponse,
    PackSnapshot,
)
from models.settings import LootSettings
from models.sources import GenType
from pf2e import thaw
from pf2e.filters import spell_filters
from pf2e.materials import materials_of_type
from pf2e.tables import sources_of_type
from utils import getLogger

logger = getLogger(__name__)
router = APIRouter()

loot_settings = LootSettings.from_env()


def get_settings() -> LootSettings:
    return loot_settings


def get_host(snapshot: PackSnapshot) -> Host:
    return Host(documents=MemoryDocumentStore(snapshot.packs))


def attach_exception_handler(app: FastAPI):
    @app.exception_handler(LootgenException)
    async def exc_handler(_, exc: LootgenException):
        logger.err_msg(f"{type(exc).__name__}: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"errs": [exc.detail]})


async def api_auth(
    authorization: Optional[str] = Header(default=None),
    settings: LootSettings = Depends(get_settings),
):
    if not settings.api_key:
        return
    if not authorization or not secrets.compare_digest(
        authorization, settings.api_key
    ):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/heartbeat")
async def heart_beat():
    return "thump thump"


@router.post("/draw", dependencies=[Depends(api_auth)])
async def draw(body: DrawRequest):
    results = await draw_from_sources(
        body.count, body.sources, get_host(body), body.options
    )
    return [r.to_dict() for r in results]


@router.post("/generate", dependencies=[Depends(api_auth)])
async def generate(plan: LootPlan, settings: LootSettings = Depends(get_settings)):
    outcome = await generate_loot(plan, get_host(plan), settings)
    return outcome.to_dict()


@router.post("/merge", dependencies=[Depends(api_auth)])
async def merge(body: MergeRequest):
    existing, new = merge_existing_stacks(
        body.existingItems, body.newItems, body.compareValues
    )
    return MergeResponse(existingItems=existing, newItems=new).to_dict()


@router.post("/price", dependencies=[Depends(api_auth)])
async def price(body: EquipmentChoices):
    valuation = calculate_final_price_and_level(
        body.item,
        material_type=body.materialType,
        material_grade=body.materialGrade,
        potency_rune=body.potencyRune,
        fundamental_rune=body.fundamentalRune,
        property_runes=body.propertyRunes,
    )
    return valuation.to_dict()


@router.post("/build", dependencies=[Depends(api_auth)])
async def build(body: BuildRequest):
    builder = make_builder(body.item).set_checks(body.checks)
    if body.materialType:
        builder.set_material(body.materialType, body.materialGrade)
    builder.set_potency(body.potencyRune)
    if body.fundamentalRune:
        builder.set_fundamental(body.fundamentalRune)
    for i, slug in enumerate(body.propertyRunes):
        if slug:
            builder.set_property_rune(i, slug)

    return BuildResponse(item=builder.build(), valuation=builder.valuation()).to_dict()


@router.get("/sources/{category}", dependencies=[Depends(api_auth)])
async def sources(category: GenType):
    return {
        store_id: source.to_dict()
        for store_id, source in sources_of_type(category).items()
    }


@router.get("/filters/{category}", dependencies=[Depends(api_auth)])
async def filters(category: GenType):
    return {
        filter_id: app_filter.to_dict()
        for filter_id, app_filter in spell_filters().items()
        if app_filter.filterCategory == category
    }


@router.get("/materials/{category}", dependencies=[Depends(api_auth)])
async def materials(category: EquipmentType):
    return thaw(materials_of_type([category.value]))
