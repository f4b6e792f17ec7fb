"""Centralized imports for the API layer (app)."""

# Standard library
import html
import logging
import os
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

# External
from dotenv import load_dotenv
from fastapi import (
    APIRouter,
    Form,
    HTTPException,
)
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from openai import OpenAI
