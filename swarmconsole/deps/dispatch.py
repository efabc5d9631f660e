from typing import Annotated

from fastapi import Depends

from swarmconsole.factories import dispatcher_factory
from swarmconsole.handlers.dispatcher import Dispatcher


def get_dispatcher() -> Dispatcher:
    return dispatcher_factory()


DispatcherDep = Annotated[Dispatcher, Depends(get_dispatcher)]
