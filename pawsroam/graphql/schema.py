# pawsroam/graphql/schema.py

import strawberry
from strawberry.schema.config import StrawberryConfig
from .queries import Query
from .mutations import Mutation

# Field and argument names are part of the client contract (owner_user_id,
# visit_date, venueId, ...), so they are published exactly as written.
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=False),
)
