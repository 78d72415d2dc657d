from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.model.rules import Rule
from kidpoints.model.users import User
from kidpoints.schema.rule_schema import RuleCreate, RuleUpdate


def get_rules(db: Session, parent_id: int) -> List[Rule]:
    return db.query(Rule).filter(Rule.parent_id == parent_id).order_by(Rule.id).all()


def _get_own_rule(db: Session, parent: User, rule_id: int) -> Rule:
    rule = db.query(Rule).filter(Rule.id == rule_id, Rule.parent_id == parent.id).first()
    if not rule:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rule not found")
    return rule


def create_rule_logic(db: Session, parent: User, request: RuleCreate) -> Rule:
    rule = Rule(parent_id=parent.id, **request.model_dump())
    db.add(rule)
    db.commit()
    db.refresh(rule)
    return rule


def update_rule_logic(db: Session, parent: User, rule_id: int, request: RuleUpdate) -> Rule:
    # renaming a rule does not rename the badges tracking it
    rule = _get_own_rule(db, parent, rule_id)
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(rule, field, value)
    db.commit()
    db.refresh(rule)
    return rule


def delete_rule_logic(db: Session, parent: User, rule_id: int) -> None:
    db.delete(_get_own_rule(db, parent, rule_id))
    db.commit()
