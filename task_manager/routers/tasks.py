from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..schemas.task import TaskCreate, TaskFilter, TaskResponse, TaskUpdate
from ..services.tasks import TaskService

router = APIRouter(dependencies=[Depends(get_current_user)])


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


@router.get("", response_model=List[TaskResponse])
def get_tasks(
    response: Response,
    task_filter: TaskFilter = Depends(),
    service: TaskService = Depends(get_task_service)
):
    """List tasks matching every filter parameter that was given"""
    tasks = service.list(task_filter)
    response.headers["X-Total-Count"] = str(len(tasks))
    return [TaskResponse.from_task(task) for task in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a new task"""
    return TaskResponse.from_task(service.create(task_data))


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Get a specific task by ID"""
    return TaskResponse.from_task(service.get(task_id))


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    service: TaskService = Depends(get_task_service)
):
    """Update the fields present in the body"""
    return TaskResponse.from_task(service.update(task_id, task_update))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Delete a task"""
    service.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
