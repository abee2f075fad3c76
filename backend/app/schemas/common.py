from pydantic import BaseModel


class InsertResult(BaseModel):
    acknowledged: bool = True
    inserted_id: str


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deleted_count: int


class SuccessResponse(BaseModel):
    success: bool = True
