# To run this server, use the following command from the root project directory:
# PYTHONPATH=. uvicorn demo.backend.main:app --reload

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
import base64
import binascii

# csvsniff Imports
from csvsniff.sniffer import CSVSniffer
from csvsniff.models import SniffOptions
from csvsniff.errors import NoNewlineFoundError
from csvsniff.utils import get_logger

logger = get_logger(__name__)

app = FastAPI()

# Allow CORS for the frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class SniffRequest(BaseModel):
    content: str
    encoding: str = "text" # 'text' or 'base64'
    options: SniffOptions = Field(default_factory=SniffOptions)
    delimiters: Optional[List[str]] = None

def _decode_content(request: SniffRequest) -> str:
    if request.encoding != "base64":
        return request.content
    # Accept both raw base64 and data URLs like "data:text/csv;base64,..."
    encoded = request.content.split(",", 1)[1] if request.content.startswith("data:") else request.content
    try:
        return base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid base64 content: {e}")

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.post("/sniff")
async def sniff_sample(request: SniffRequest):
    """
    Sniffs the uploaded sample.
    - Decodes the content.
    - Runs the sniffer with the given options and allowed delimiters.
    - Returns the result with camelCase keys.
    """
    sample = _decode_content(request)
    sniffer = CSVSniffer(request.delimiters)
    try:
        result = sniffer.sniff(sample, request.options)
    except NoNewlineFoundError as e:
        logger.error(f"Sniff failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return result.model_dump(by_alias=True, mode="json")
