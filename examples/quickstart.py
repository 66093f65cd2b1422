import asyncio
import logging

import restful
from restful import Morph, set_morph
from restful.marshal import camelize, underscore

logging.basicConfig(level=logging.DEBUG)

api = restful.default('https://jsonplaceholder.typicode.com', marshal=camelize, unmarshal=underscore)

set_morph(api.users, Morph.RESULT, lambda path, users: [user['name'] for user in users])


async def main():
    print(await api.users('GET'))
    print(await api.posts[1]('GET'))
    print(await api.posts('POST', {'title': 'foo', 'body': 'bar', 'user_id': 1}))
    print(await api.comments('GET', query={'post_id': 1, 'email': None}))


if __name__ == '__main__':
    asyncio.run(main())
