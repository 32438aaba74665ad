# pawsroam/graphql/router.py
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext, GraphQLRouter

from ..core.security import decode_access_token, get_token_from_header
from ..db.session import get_db
from ..schemas.token import TokenPayload
from ..services.rating_aggregator import RatingAggregator, get_rating_aggregator
from .schema import schema


class CustomContext(BaseContext):
    def __init__(
        self,
        db: Session,
        aggregator: RatingAggregator,
        user: Optional[TokenPayload] = None,
    ):
        super().__init__()
        self.db = db
        self.aggregator = aggregator
        self.user = user


def get_context(
    request: Request,
    db: Session = Depends(get_db),
    aggregator: RatingAggregator = Depends(get_rating_aggregator),
) -> CustomContext:
    # A missing or invalid token leaves the request anonymous; resolvers that
    # need a user reject it through the permission gate.
    user = None
    token = get_token_from_header(request.headers.get("Authorization"))
    if token:
        user = decode_access_token(token)

    return CustomContext(db=db, aggregator=aggregator, user=user)


graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
)
