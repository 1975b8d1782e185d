from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..schemas.task_status import TaskStatusCreate, TaskStatusResponse, TaskStatusUpdate
from ..services.task_statuses import TaskStatusService

router = APIRouter(dependencies=[Depends(get_current_user)])


def get_task_status_service(db: Session = Depends(get_db)) -> TaskStatusService:
    return TaskStatusService(db)


@router.get("", response_model=List[TaskStatusResponse])
def get_task_statuses(
    response: Response,
    service: TaskStatusService = Depends(get_task_status_service)
):
    statuses = service.list()
    response.headers["X-Total-Count"] = str(len(statuses))
    return statuses


@router.post("", response_model=TaskStatusResponse, status_code=status.HTTP_201_CREATED)
def create_task_status(
    data: TaskStatusCreate,
    service: TaskStatusService = Depends(get_task_status_service)
):
    return service.create(data)


@router.get("/{status_id}", response_model=TaskStatusResponse)
def get_task_status(status_id: int, service: TaskStatusService = Depends(get_task_status_service)):
    return service.get(status_id)


@router.put("/{status_id}", response_model=TaskStatusResponse)
def update_task_status(
    status_id: int,
    data: TaskStatusUpdate,
    service: TaskStatusService = Depends(get_task_status_service)
):
    return service.update(status_id, data)


@router.delete("/{status_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_status(status_id: int, service: TaskStatusService = Depends(get_task_status_service)):
    service.delete(status_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
