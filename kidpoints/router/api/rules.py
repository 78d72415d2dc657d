from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.rule_logic import create_rule_logic, delete_rule_logic, get_rules, update_rule_logic
from kidpoints.router.dependencies import get_current_parent
from kidpoints.schema.rule_schema import RuleCreate, RuleOut, RuleUpdate

router = APIRouter()


@router.get("/rules", response_model=List[RuleOut], status_code=status.HTTP_200_OK)
async def list_rules(db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return get_rules(db, parent.id)


@router.post("/rules", response_model=RuleOut, status_code=status.HTTP_201_CREATED)
async def create_rule(request: RuleCreate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return create_rule_logic(db, parent, request)


@router.put("/rules/{rule_id}", response_model=RuleOut, status_code=status.HTTP_200_OK)
async def update_rule(rule_id: int, request: RuleUpdate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return update_rule_logic(db, parent, rule_id, request)


@router.delete("/rules/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rule(rule_id: int, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    delete_rule_logic(db, parent, rule_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
