import logging
from typing import List

from ..core.exceptions import ResourceNotFoundError
from ..models import Label
from ..schemas.label import LabelCreate, LabelUpdate
from .base import BaseService

logger = logging.getLogger(__name__)


class LabelService(BaseService):

    def list(self) -> List[Label]:
        return self.db.query(Label).order_by(Label.id).all()

    def get(self, label_id: int) -> Label:
        label = self.db.get(Label, label_id)
        if label is None:
            raise ResourceNotFoundError(f"Label with id {label_id} not found")
        return label

    def create(self, data: LabelCreate) -> Label:
        label = Label(name=data.name)
        with self.transaction():
            self.db.add(label)
        self.db.refresh(label)
        logger.info(f"Created label '{label.name}' (id={label.id})")
        return label

    def update(self, label_id: int, data: LabelUpdate) -> Label:
        label = self.get(label_id)
        name = data.field("name").require("name")
        with self.transaction():
            name.if_present(lambda value: setattr(label, "name", value))
        self.db.refresh(label)
        return label

    def delete(self, label_id: int) -> None:
        label = self.get(label_id)
        with self.transaction():
            self.db.delete(label)
        logger.info(f"Deleted label id={label_id}")
