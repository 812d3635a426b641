# ------------------------------------------------------------------------------------------------ #
# MIT License                                                                                      #
#                                                                                                  #
# Copyright (c) 2020, Microsoft Corporation                                                        #
#                                                                                                  #
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software    #
# and associated documentation files (the "Software"), to deal in the Software without             #
# restriction, including without limitation the rights to use, copy, modify, merge, publish,       #
# distribute, sublicense, and/or sell copies of the Software, and to permit persons to whom the    #
# Software is furnished to do so, subject to the following conditions:                             #
#                                                                                                  #
# The above copyright notice and this permission notice shall be included in all copies or         #
# substantial portions of the Software.                                                            #
#                                                                                                  #
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING    #
# BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND       #
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,     #
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,   #
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.          #
# ------------------------------------------------------------------------------------------------ #

from threading import Thread

from .._base.errors import BorrowError
from .._base.test_case import TestCase
from .shared import Shared, make_shared


class TestShared(TestCase):

    def test_readers_see_writes(self):
        cell = Shared([])
        alias = make_shared(cell)
        self.assertIs(alias, cell)
        with cell.borrow_mut() as lst:
            lst.append(1)
        self.assertEqual(alias.borrow(), [1])

    def test_nested_borrow_mut_raises(self):
        cell = Shared({})
        with cell.borrow_mut():
            with self.assertRaisesRegex(BorrowError, r"dict is already mutably borrowed"):
                with cell.borrow_mut():
                    pass

    def test_writer_released_after_exception(self):
        cell = Shared({})
        with self.assertRaises(RuntimeError):
            with cell.borrow_mut():
                raise RuntimeError("oops")
        with cell.borrow_mut() as d:
            d['x'] = 1
        self.assertEqual(cell.borrow(), {'x': 1})

    def test_replace(self):
        cell = Shared(1)
        alias = cell
        cell.replace(2)
        self.assertEqual(alias.borrow(), 2)

    def test_no_nested_cells(self):
        with self.assertRaises(TypeError):
            Shared(Shared(1))

    def test_make_shared_wraps_plain_objects(self):
        obj = object()
        cell = make_shared(obj)
        self.assertIsInstance(cell, Shared)
        self.assertIs(cell.borrow(), obj)

    def test_writers_are_serialized(self):
        cell = Shared({'n': 0})

        def work():
            for _ in range(1000):
                with cell.borrow_mut() as d:
                    d['n'] = d['n'] + 1

        threads = [Thread(target=work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(cell.borrow()['n'], 4000)
