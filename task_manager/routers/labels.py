from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..schemas.label import LabelCreate, LabelResponse, LabelUpdate
from ..services.labels import LabelService

router = APIRouter(dependencies=[Depends(get_current_user)])


def get_label_service(db: Session = Depends(get_db)) -> LabelService:
    return LabelService(db)


@router.get("", response_model=List[LabelResponse])
def get_labels(response: Response, service: LabelService = Depends(get_label_service)):
    labels = service.list()
    response.headers["X-Total-Count"] = str(len(labels))
    return labels


@router.post("", response_model=LabelResponse, status_code=status.HTTP_201_CREATED)
def create_label(data: LabelCreate, service: LabelService = Depends(get_label_service)):
    return service.create(data)


@router.get("/{label_id}", response_model=LabelResponse)
def get_label(label_id: int, service: LabelService = Depends(get_label_service)):
    return service.get(label_id)


@router.put("/{label_id}", response_model=LabelResponse)
def update_label(
    label_id: int,
    data: LabelUpdate,
    service: LabelService = Depends(get_label_service)
):
    return service.update(label_id, data)


@router.delete("/{label_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_label(label_id: int, service: LabelService = Depends(get_label_service)):
    service.delete(label_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
