# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from typing import Annotated

from fastapi import FastAPI
from pydantic import BaseModel, Field

from solver.sudoku_tools import sanity_check, solve_tool

app = FastAPI(title="Sudoku Backtracking Solver API")

Row = Annotated[list[int], Field(min_length=9, max_length=9)]


class GridModel(BaseModel):
    grid: Annotated[list[Row], Field(min_length=9, max_length=9)]


@app.post("/solve")
def api_solve(payload: GridModel):
    return solve_tool(payload.grid)


@app.post("/sanity_check")
def api_sanity(payload: GridModel):
    return sanity_check(payload.grid)
