from pydantic import BaseModel, StrictInt


class SummaryResponse(BaseModel):
    data: StrictInt
