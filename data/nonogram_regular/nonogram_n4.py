# Copyright 2010 Hakan Kjellerstrand hakank@bonetmail.com
#
# Licensed under the Apache License, Version 2.0 (the 'License'); 
# you may not use this file except in compliance with the License. 
# You may obtain a copy of the License at 
#
#     http://www.apache.org/licenses/LICENSE-2.0 
#
# Unless required by applicable law or agreed to in writing, software 
# distributed under the License is distributed on an 'AS IS' BASIS, 
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. 
# See the License for the specific language governing permissions and 
# limitations under the License. 
#
# http://eclipse.crosscoreop.com/eclipse/examples/nono.ecl.txt
# Problem n4
#
rows = 6
row_rule_len = 2
row_rules = [
    [2,1],
    [0,1],
    [0,2],
    [0,2],
    [0,1],
    [1,2]
    ]

cols = 6
col_rule_len = 2
col_rules = [
    [1,2],
    [0,1],
    [0,2],
    [0,2],
    [0,1],
    [2,1]
    ]

