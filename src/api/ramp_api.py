"""
Ramp desk HTTP API.

Thin FastAPI surface over the GroundOperations facade. Domain rejections
map to 422, unknown targets to 404 and duplicate ids to 409.
"""

from datetime import datetime, time
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from src.ground_ops.application import GroundOperations
from src.ground_ops.config import configure_logging, load_settings
from src.ground_ops.exceptions import DuplicateEntityError, TargetNotFoundError
from src.ground_ops.schemas.audit import LogType
from src.ground_ops.schemas.flight import FlightStatus
from src.ground_ops.schemas.operator import OperatorProfile, OperatorStatus, Vehicle
from src.ground_ops.schemas.result import Rejection
from src.ground_ops.schemas.target import RequiredEquipment


# --- Pydantic Schemas (The JSON Contract) ---


class LogEntrySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    id: str
    timestamp: datetime
    type: LogType
    message: str
    author: str


class FlightSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    registration: str
    airline_code: str
    model: str
    arrival_flight_number: str
    departure_flight_number: str
    destination_icao: str
    position_id: str
    eta: Optional[time] = None
    etd: Optional[time] = None
    status: FlightStatus
    logs: List[LogEntrySchema]


class FlightCreatedSchema(BaseModel):
    flight: FlightSchema
    is_priority: bool


class OperatorSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    war_name: str
    status: OperatorStatus = OperatorStatus.AVAILABLE


class VehicleSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    vehicle_type: str


class DecisionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    target_id: str
    operator_id: str
    was_busy_at_assignment: bool
    resulting_log_entry: LogEntrySchema


class PriorityCheckSchema(BaseModel):
    etd: Optional[str]
    is_priority: bool


# --- Requests ---


class CreateFlightRequest(BaseModel):
    airline_code: str = ""
    registration: str = ""
    model: str = ""
    arrival_flight_number: str = ""
    eta: str = ""
    departure_flight_number: str = ""
    destination: str = ""
    position_id: str = ""
    etd: str = ""
    actor: Optional[str] = None


class AssignmentRequest(BaseModel):
    target_kind: Literal["flight", "vehicle"]
    target_id: str
    operator_id: str
    actor: Optional[str] = None
    required_equipment: RequiredEquipment = RequiredEquipment.SERVER


def _rejection_error(rejection: Rejection) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "reason": rejection.reason.value,
            "message": rejection.message,
            "field": rejection.field,
        },
    )


def create_app(operations: Optional[GroundOperations] = None) -> FastAPI:
    """
    Build the API around a GroundOperations instance.

    Args:
        operations: Facade to serve. If None, one is built from the
            environment settings.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    ops = operations or GroundOperations(settings=settings)

    app = FastAPI(title="Ramp Desk API")

    @app.exception_handler(TargetNotFoundError)
    async def target_not_found(request: Request, exc: TargetNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(DuplicateEntityError)
    async def duplicate_entity(request: Request, exc: DuplicateEntityError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    # --- API Endpoints ---

    @app.post("/flights", response_model=FlightCreatedSchema, status_code=201)
    def create_flight(request: CreateFlightRequest):
        form = request.model_dump(exclude={"actor"})
        result = ops.create_flight(form, actor=request.actor)
        if isinstance(result, Rejection):
            raise _rejection_error(result)
        return FlightCreatedSchema(
            flight=FlightSchema.model_validate(result.record),
            is_priority=result.is_priority,
        )

    @app.get("/flights", response_model=List[FlightSchema])
    def list_flights():
        return ops.list_flights()

    @app.get("/flights/board")
    def flight_board():
        board = ops.board()
        # NaN is not valid JSON
        board = board.astype(object).where(board.notna(), None)
        return board.to_dict(orient="records")

    @app.get("/flights/priority-check", response_model=PriorityCheckSchema)
    def priority_check(etd: Optional[str] = None):
        return PriorityCheckSchema(etd=etd, is_priority=ops.check_priority(etd))

    @app.get("/flights/{flight_id}", response_model=FlightSchema)
    def get_flight(flight_id: str):
        return ops.get_flight(flight_id)

    @app.post("/operators", response_model=OperatorSchema, status_code=201)
    def register_operator(request: OperatorSchema):
        ops.register_operator(
            OperatorProfile(id=request.id, war_name=request.war_name, status=request.status)
        )
        return request

    @app.get("/operators", response_model=List[OperatorSchema])
    def list_operators():
        return ops.list_operators()

    @app.post("/vehicles", response_model=VehicleSchema, status_code=201)
    def register_vehicle(request: VehicleSchema):
        ops.register_vehicle(Vehicle(id=request.id, vehicle_type=request.vehicle_type))
        return request

    @app.post("/assignments", response_model=DecisionSchema, status_code=201)
    def create_assignment(request: AssignmentRequest):
        result = ops.designate(
            request.target_kind,
            request.target_id,
            request.operator_id,
            actor=request.actor,
            required_equipment=request.required_equipment,
        )
        if isinstance(result, Rejection):
            raise _rejection_error(result)
        return result

    return app


# uvicorn src.api.ramp_api:app
app = create_app()
