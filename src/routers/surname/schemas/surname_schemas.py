# schemas.py
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict


class SearchRequest(BaseModel):
    # Raw values; range and format checks happen in the validators
    assembly_id: Optional[Union[int, str]] = None
    page: Optional[Union[int, str]] = None
    limit: Optional[Union[int, str]] = None


class AssemblyOut(BaseModel):
    id: int
    assembly_id: int
    assembly_name: str

    model_config = ConfigDict(from_attributes=True)


class SurnameRowOut(BaseModel):
    id: int
    surname: Optional[str]
    surname_caste: Optional[str]
    surname_category: Optional[str]
    assembly_no: int
    count_num: int

    model_config = ConfigDict(from_attributes=True)
