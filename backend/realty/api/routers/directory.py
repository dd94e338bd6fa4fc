from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from realty.models import (
    Agent, AgentCreate, Testimonial, TestimonialCreate, WaitlistEntry, WaitlistEntryCreate
)
from realty.modules.storage import Storage
from realty.core.storage_provider import get_storage
import logging

logger = logging.getLogger(__name__)

agents_router = APIRouter()
testimonials_router = APIRouter()
waitlist_router = APIRouter()


# Agents
@agents_router.get("/", response_model=List[Agent])
async def get_agents(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_agents()
    except Exception as e:
        logger.error(f"Failed to get agents: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve agents"
        )


@agents_router.get("/{agent_id}", response_model=Agent)
async def get_agent(agent_id: int, storage: Storage = Depends(get_storage)):
    try:
        agent = await storage.get_agent(agent_id)
    except Exception as e:
        logger.error(f"Failed to get agent {agent_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve agent"
        )

    if not agent:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agent not found")
    return agent


@agents_router.post("/", response_model=Agent, status_code=status.HTTP_201_CREATED)
async def create_agent(agent: AgentCreate, storage: Storage = Depends(get_storage)):
    try:
        return await storage.create_agent(agent)
    except Exception as e:
        logger.error(f"Failed to create agent: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create agent"
        )


# Testimonials
@testimonials_router.get("/", response_model=List[Testimonial])
async def get_testimonials(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_testimonials()
    except Exception as e:
        logger.error(f"Failed to get testimonials: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve testimonials"
        )


@testimonials_router.get("/{testimonial_id}", response_model=Testimonial)
async def get_testimonial(testimonial_id: int, storage: Storage = Depends(get_storage)):
    try:
        testimonial = await storage.get_testimonial(testimonial_id)
    except Exception as e:
        logger.error(f"Failed to get testimonial {testimonial_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve testimonial"
        )

    if not testimonial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Testimonial not found")
    return testimonial


@testimonials_router.post("/", response_model=Testimonial, status_code=status.HTTP_201_CREATED)
async def create_testimonial(testimonial: TestimonialCreate, storage: Storage = Depends(get_storage)):
    try:
        return await storage.create_testimonial(testimonial)
    except Exception as e:
        logger.error(f"Failed to create testimonial: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create testimonial"
        )


# Waitlist
@waitlist_router.post("/", response_model=WaitlistEntry, status_code=status.HTTP_201_CREATED)
async def join_waitlist(entry: WaitlistEntryCreate, storage: Storage = Depends(get_storage)):
    """Join the waitlist; the terms must be accepted"""
    if not entry.agreed_to_terms:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You must agree to the terms to join the waitlist"
        )

    try:
        return await storage.create_waitlist_entry(entry)
    except Exception as e:
        logger.error(f"Failed to create waitlist entry: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to join waitlist"
        )


@waitlist_router.get("/", response_model=List[WaitlistEntry])
async def get_waitlist(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_waitlist_entries()
    except Exception as e:
        logger.error(f"Failed to get waitlist entries: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve waitlist"
        )


@waitlist_router.get("/{entry_id}", response_model=WaitlistEntry)
async def get_waitlist_entry(entry_id: int, storage: Storage = Depends(get_storage)):
    try:
        entry = await storage.get_waitlist_entry(entry_id)
    except Exception as e:
        logger.error(f"Failed to get waitlist entry {entry_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve waitlist entry"
        )

    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Waitlist entry not found")
    return entry
